"""Volume regions of a zone: the ``.wtr`` file format and an editor over the regions."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, List, Sequence, Tuple, Union

from .hotkeys import RegionType

Vec3 = Tuple[float, float, float]

MAGIC = b"EQEMUWATER"
VERSION = 2
DEFAULT_SPEED = 20.0
MIN_EXTENT = 0.1
_NEW_EXTENT = 10.0

_U32 = struct.Struct("<I")
_REGION = struct.Struct("<I12f")

AxisLike = Union[int, str]


class VolumeFormatError(ValueError):
    """Raised when a volume file is malformed, truncated or of an unknown version."""


@dataclass
class VolumeRegion:
    """An oriented box region of some area type."""

    area_type: int = int(RegionType.WATER)
    pos: Vec3 = (0.0, 0.0, 0.0)
    rot: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    extents: Vec3 = (_NEW_EXTENT, _NEW_EXTENT, _NEW_EXTENT)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise VolumeFormatError(f"truncated volume file while reading {what}")
    return data


def read_volumes(stream: BinaryIO) -> List[VolumeRegion]:
    """Read the regions of a volume file from a binary stream."""
    magic = _read_exact(stream, len(MAGIC), "magic")
    if magic != MAGIC:
        raise VolumeFormatError("not a volume file")
    (version,) = _U32.unpack(_read_exact(stream, _U32.size, "version"))
    if version != VERSION:
        raise VolumeFormatError(f"unsupported volume file version {version}")
    (count,) = _U32.unpack(_read_exact(stream, _U32.size, "region count"))

    regions = []
    for index in range(count):
        area_type, *values = _REGION.unpack(_read_exact(stream, _REGION.size, f"region {index}"))
        regions.append(
            VolumeRegion(
                area_type=area_type,
                pos=tuple(values[0:3]),
                rot=tuple(values[3:6]),
                scale=tuple(values[6:9]),
                extents=tuple(values[9:12]),
            )
        )
    return regions


def write_volumes(stream: BinaryIO, regions: Sequence[VolumeRegion]) -> None:
    """Write regions to a binary stream in the version 2 volume format."""
    stream.write(MAGIC)
    stream.write(_U32.pack(VERSION))
    stream.write(_U32.pack(len(regions)))
    for region in regions:
        try:
            stream.write(
                _REGION.pack(
                    int(region.area_type),
                    *region.pos,
                    *region.rot,
                    *region.scale,
                    *region.extents,
                )
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode region: {exc}") from exc


def load_volumes(path: Union[str, Path]) -> List[VolumeRegion]:
    """Read the regions of the volume file at ``path``."""
    with open(path, "rb") as stream:
        return read_volumes(stream)


def save_volumes(path: Union[str, Path], regions: Sequence[VolumeRegion]) -> None:
    """Write regions to the volume file at ``path``."""
    with open(path, "wb") as stream:
        write_volumes(stream, regions)


def _axis_index(axis: AxisLike) -> int:
    if isinstance(axis, str):
        lookup = {"x": 0, "y": 1, "z": 2}
        key = axis.lower()
        if key not in lookup:
            raise ValueError(f"unknown axis {axis!r}")
        return lookup[key]
    if axis not in (0, 1, 2):
        raise ValueError(f"unknown axis {axis!r}")
    return int(axis)


def _with_component(vector: Vec3, index: int, value: float) -> Vec3:
    items = list(vector)
    items[index] = value
    return (items[0], items[1], items[2])


@dataclass
class VolumeEditor:
    """Regions being edited, with a selection and a modified flag."""

    regions: List[VolumeRegion] = field(default_factory=list)
    selected: int = -1
    modified: bool = False

    @property
    def selected_region(self) -> Union[VolumeRegion, None]:
        """The selected region, or None."""
        if self.selected < 0:
            return None
        return self.regions[self.selected]

    def add_region(self, hit: Sequence[float]) -> VolumeRegion:
        """Add a water region at a world hit point and select it."""
        region = VolumeRegion(
            area_type=int(RegionType.WATER),
            pos=(float(hit[2]), float(hit[0]), float(hit[1])),
            rot=(0.0, 0.0, 0.0),
            scale=(1.0, 1.0, 1.0),
            extents=(_NEW_EXTENT, _NEW_EXTENT, _NEW_EXTENT),
        )
        self.regions.append(region)
        self.selected = len(self.regions) - 1
        self.modified = True
        return region

    def select(self, index: int) -> VolumeRegion:
        """Select the region at ``index``."""
        if index < 0 or index >= len(self.regions):
            raise IndexError(f"region {index} out of range")
        self.selected = index
        return self.regions[index]

    def delete_selected(self) -> bool:
        """Remove the selected region; whether one was removed."""
        if self.selected == -1:
            return False
        del self.regions[self.selected]
        self.selected = -1
        return True

    def rotate(self, speed: float = DEFAULT_SPEED) -> bool:
        """Turn the selected region about z by a quarter of ``speed`` degrees, wrapping at ±90."""
        region = self.selected_region
        if region is None:
            return False
        z = region.rot[2] + speed * 0.25
        if z > 90.0:
            z -= 180.0
        elif z < -90.0:
            z += 180.0
        region.rot = _with_component(region.rot, 2, z)
        return True

    def expand(self, axis: AxisLike, speed: float = DEFAULT_SPEED) -> bool:
        """Grow the selected region along ``axis``."""
        index = _axis_index(axis)
        region = self.selected_region
        if region is None:
            return False
        region.extents = _with_component(region.extents, index, region.extents[index] + speed * 0.01)
        return True

    def shrink(self, axis: AxisLike, speed: float = DEFAULT_SPEED) -> bool:
        """Shrink the selected region along ``axis``, never below the minimum extent."""
        index = _axis_index(axis)
        region = self.selected_region
        if region is None:
            return False
        value = region.extents[index] - speed * 0.01
        if value < MIN_EXTENT:
            value = MIN_EXTENT
        region.extents = _with_component(region.extents, index, value)
        return True

    def load(self, path: Union[str, Path]) -> bool:
        """Replace the regions with those of a volume file; whether it could be read."""
        self.modified = False
        self.selected = -1
        self.regions = []
        try:
            self.regions = load_volumes(path)
        except (OSError, VolumeFormatError):
            return False
        return True

    def load_first(self, paths: Iterable[Union[str, Path]]) -> bool:
        """Load the first of several candidate files that can be read."""
        return any(self.load(path) for path in paths)

    def save(self, path: Union[str, Path]) -> bool:
        """Write the regions if they were modified; whether anything was written."""
        if not self.modified:
            return False
        save_volumes(path, self.regions)
        self.modified = False
        return True