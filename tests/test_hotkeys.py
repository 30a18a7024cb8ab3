import pytest

from eqmaptools.hotkeys import (
    EntityRegistry,
    HotkeyRegistry,
    Modifier,
    RegionType,
    entity_name,
    region_type_name,
)

KEY_DELETE = 261
KEY_O = 79


class Listener:
    def __init__(self):
        self.heard = []

    def on_hotkey(self, ident):
        self.heard.append(ident)


@pytest.mark.parametrize(
    "region, name",
    [
        (RegionType.NORMAL, "Normal"),
        (RegionType.WATER, "Water"),
        (RegionType.LAVA, "Lava"),
        (RegionType.ZONE_LINE, "ZoneLine"),
        (RegionType.PVP, "PvP"),
        (RegionType.SLIME, "Slime"),
        (RegionType.ICE, "Ice"),
        (RegionType.V_WATER, "V Water"),
        (RegionType.GENERAL_AREA, "Misc"),
        (RegionType.PREFER_PATHING, "Unsupported"),
        (999, "Unsupported"),
    ],
)
def test_region_type_name(region, name):
    assert region_type_name(region) == name


def test_region_type_name_accepts_int():
    assert region_type_name(1) == "Water"


def test_hotkey_fires_on_release():
    registry = HotkeyRegistry()
    listener = Listener()
    registry.register(listener, 500, KEY_DELETE)
    assert registry.try_hotkey({KEY_DELETE}) is False
    assert listener.heard == []
    assert registry.try_hotkey(set()) is True
    assert listener.heard == [500]
    assert registry.try_hotkey(set()) is False
    assert listener.heard == [500]


def test_hotkey_requires_modifier():
    registry = HotkeyRegistry()
    listener = Listener()
    entry = registry.register(listener, 1, KEY_O, ctrl=True)
    assert entry.modifiers == Modifier.CONTROL
    registry.try_hotkey({KEY_O})
    assert registry.try_hotkey(set()) is False
    registry.try_hotkey({KEY_O}, ctrl=True)
    assert registry.try_hotkey(set(), ctrl=True) is True
    assert listener.heard == [1]


def test_only_first_matching_hotkey_fires():
    registry = HotkeyRegistry()
    first, second = Listener(), Listener()
    registry.register(first, 1, KEY_O, alt=True)
    registry.register(second, 2, KEY_O, ctrl=True)
    registry.try_hotkey({KEY_O})
    assert registry.try_hotkey(set(), ctrl=True, alt=True) is True
    assert first.heard == [1]
    assert second.heard == []


def test_callable_listener():
    registry = HotkeyRegistry()
    heard = []
    registry.register(heard.append, 7, KEY_DELETE)
    registry.try_hotkey({KEY_DELETE})
    registry.try_hotkey(set())
    assert heard == [7]


def test_register_none_listener_ignored():
    registry = HotkeyRegistry()
    assert registry.register(None, 1, KEY_DELETE) is None
    assert registry.entries == []


def test_unregister():
    registry = HotkeyRegistry()
    listener = Listener()
    registry.register(listener, 1, KEY_DELETE)
    assert registry.unregister(listener, 2) is False
    assert registry.unregister(listener, 1) is True
    assert registry.entries == []
    registry.try_hotkey({KEY_DELETE})
    assert registry.try_hotkey(set()) is False
    assert listener.heard == []


def test_entity_name_identifies_entity():
    entity = object()
    name = entity_name(entity)
    assert name.startswith("entity_0x")
    assert int(name[7:], 16) == id(entity)


def test_entity_registry_register_and_order():
    registry = EntityRegistry()
    owner_a, owner_b = object(), object()
    e1, e2, e3 = object(), object(), object()
    assert registry.register(owner_a, e1) == entity_name(e1)
    registry.register(owner_b, e2)
    registry.register(owner_a, e3)
    assert list(registry.entities()) == [e1, e3, e2]


def test_entity_registry_reregister_moves_to_end():
    registry = EntityRegistry()
    owner = object()
    e1, e2 = object(), object()
    registry.register(owner, e1)
    registry.register(owner, e2)
    registry.register(owner, e1)
    assert list(registry.entities()) == [e2, e1]


def test_entity_registry_unregister():
    registry = EntityRegistry()
    owner = object()
    e1 = object()
    assert registry.unregister(owner, e1) is False
    registry.register(owner, e1)
    assert registry.unregister(owner, e1) is True
    assert list(registry.entities()) == []


def test_entity_registry_unregister_owner():
    registry = EntityRegistry()
    owner_a, owner_b = object(), object()
    e1, e2 = object(), object()
    registry.register(owner_a, e1)
    registry.register(owner_b, e2)
    registry.unregister_owner(owner_a)
    assert list(registry.entities()) == [e2]