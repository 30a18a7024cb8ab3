"""Region type names, hotkey dispatch and per-owner entity bookkeeping for the editor scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Collection, Dict, Iterator, List, Optional, Union


class RegionType(IntEnum):
    """Kinds of volume a point in a zone can lie in."""

    NORMAL = 0
    WATER = 1
    LAVA = 2
    ZONE_LINE = 3
    PVP = 4
    SLIME = 5
    ICE = 6
    V_WATER = 7
    GENERAL_AREA = 8
    PREFER_PATHING = 9
    DISABLE_NAV_MESH = 10


_REGION_NAMES = {
    RegionType.NORMAL: "Normal",
    RegionType.WATER: "Water",
    RegionType.LAVA: "Lava",
    RegionType.ZONE_LINE: "ZoneLine",
    RegionType.PVP: "PvP",
    RegionType.SLIME: "Slime",
    RegionType.ICE: "Ice",
    RegionType.V_WATER: "V Water",
    RegionType.GENERAL_AREA: "Misc",
}


def region_type_name(region_type: Union[RegionType, int]) -> str:
    """Display name of a region type; "Unsupported" for types without one."""
    try:
        key = RegionType(region_type)
    except ValueError:
        return "Unsupported"
    return _REGION_NAMES.get(key, "Unsupported")


class Modifier(IntFlag):
    """Keyboard modifier bits."""

    NONE = 0
    SHIFT = 0x1
    CONTROL = 0x2
    ALT = 0x4


@dataclass
class HotkeyEntry:
    """A registered hotkey: an identifier, a key, the modifiers it needs and who hears it."""

    id: int
    key: int
    modifiers: Modifier
    listener: Any


def _notify(listener: Any, ident: int) -> None:
    handler = getattr(listener, "on_hotkey", None)
    if handler is not None:
        handler(ident)
    else:
        listener(ident)


@dataclass
class HotkeyRegistry:
    """Fires a listener when its key is released, at most one hotkey per check."""

    entries: List[HotkeyEntry] = field(default_factory=list)
    _key_status: Dict[int, bool] = field(default_factory=dict, repr=False)

    def register(
        self,
        listener: Any,
        ident: int,
        key: int,
        ctrl: bool = False,
        alt: bool = False,
        shift: bool = False,
    ) -> Optional[HotkeyEntry]:
        """Add a hotkey; a missing listener is ignored and None returned."""
        if listener is None:
            return None
        modifiers = Modifier.NONE
        if shift:
            modifiers |= Modifier.SHIFT
        if ctrl:
            modifiers |= Modifier.CONTROL
        if alt:
            modifiers |= Modifier.ALT
        entry = HotkeyEntry(id=ident, key=key, modifiers=modifiers, listener=listener)
        self.entries.append(entry)
        return entry

    def unregister(self, listener: Any, ident: int) -> bool:
        """Remove the first hotkey of ``listener`` with ``ident``; whether one was removed."""
        for position, entry in enumerate(self.entries):
            if entry.listener is listener and entry.id == ident:
                del self.entries[position]
                return True
        return False

    def try_hotkey(
        self,
        keys_down: Collection[int],
        shift: bool = False,
        ctrl: bool = False,
        alt: bool = False,
    ) -> bool:
        """Check the keys held now against the last check; whether a hotkey fired."""
        mods = Modifier.NONE
        if shift:
            mods |= Modifier.SHIFT
        if ctrl:
            mods |= Modifier.CONTROL
        if alt:
            mods |= Modifier.ALT

        hit = False
        for entry in self.entries:
            if hit:
                break
            released = entry.key not in keys_down
            was_pressed = self._key_status.get(entry.key, False)
            if released and was_pressed and (not entry.modifiers or entry.modifiers & mods):
                _notify(entry.listener, entry.id)
                hit = True

        for entry in self.entries:
            self._key_status[entry.key] = entry.key in keys_down
        return hit


def entity_name(entity: Any) -> str:
    """A name identifying ``entity`` by its identity."""
    return f"entity_{id(entity):#x}"


@dataclass
class EntityRegistry:
    """Entities grouped by the owner that registered them, in registration order."""

    _by_owner: Dict[Any, List[Any]] = field(default_factory=dict)

    def register(self, owner: Any, entity: Any) -> str:
        """Register ``entity`` under ``owner``, moving it to the end; returns its name."""
        self.unregister(owner, entity)
        self._by_owner.setdefault(owner, []).append(entity)
        return entity_name(entity)

    def unregister(self, owner: Any, entity: Any) -> bool:
        """Remove ``entity`` from ``owner``'s list; whether it was there."""
        owned = self._by_owner.get(owner)
        if owned is None:
            return False
        for position, candidate in enumerate(owned):
            if candidate is entity:
                del owned[position]
                return True
        return False

    def unregister_owner(self, owner: Any) -> None:
        """Forget every entity of ``owner``."""
        owned = self._by_owner.get(owner)
        if owned is not None:
            owned.clear()

    def entities(self) -> Iterator[Any]:
        """All registered entities, owner by owner."""
        for owned in self._by_owner.values():
            yield from owned