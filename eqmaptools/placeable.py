"""Placed model instances and groups of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Placeable:
    """One model placed in the world."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    rotate_z: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    name: str = ""
    file_name: str = ""

    def set_location(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def set_rotation(self, x: float, y: float, z: float) -> None:
        self.rotate_x, self.rotate_y, self.rotate_z = x, y, z

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.scale_x, self.scale_y, self.scale_z = x, y, z


@dataclass
class PlaceableGroup:
    """A group of placeables sharing a location, tile location, rotation and scale."""

    from_tog: bool = False
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    tile_x: float = 0.0
    tile_y: float = 0.0
    tile_z: float = 0.0
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    placeables: List[Placeable] = field(default_factory=list)

    def set_location(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def set_tile_location(self, x: float, y: float, z: float) -> None:
        self.tile_x, self.tile_y, self.tile_z = x, y, z

    def set_rotation(self, x: float, y: float, z: float) -> None:
        self.rot_x, self.rot_y, self.rot_z = x, y, z

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.scale_x, self.scale_y, self.scale_z = x, y, z

    def add_placeable(self, placeable: Placeable) -> None:
        self.placeables.append(placeable)