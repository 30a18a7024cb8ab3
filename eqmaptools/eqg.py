"""In-memory model of EQG zone data: materials, geometry, regions and terrain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@dataclass
class MaterialProperty:
    """One named shader parameter of a material."""

    name: str = ""
    type: int = 0
    value_i: int = 0
    value_f: float = 0.0
    value_s: str = ""


@dataclass
class Material:
    """A named material with its shader and parameters."""

    name: str = ""
    shader: str = ""
    properties: List[MaterialProperty] = field(default_factory=list)


@dataclass
class Vertex:
    """A mesh vertex with position, texture coordinate, normal and colour."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    tex: Vec2 = (0.0, 0.0)
    nor: Vec3 = (0.0, 0.0, 0.0)
    col: int = 0


@dataclass
class Polygon:
    """A triangle referring to three vertices and one material index."""

    flags: int = 0
    verts: Tuple[int, int, int] = (0, 0, 0)
    material: int = -1


@dataclass
class Geometry:
    """A named mesh with its materials, vertices and polygons."""

    name: str = ""
    materials: List[Material] = field(default_factory=list)
    vertices: List[Vertex] = field(default_factory=list)
    polygons: List[Polygon] = field(default_factory=list)

    def add_material(self, material: Material) -> None:
        self.materials.append(material)

    def add_vertex(self, vertex: Vertex) -> None:
        self.vertices.append(vertex)

    def add_polygon(self, polygon: Polygon) -> None:
        self.polygons.append(polygon)

    def material_name(self, index: int) -> str:
        """Name of the material at ``index``, or an empty string when out of range."""
        if index < 0 or index >= len(self.materials):
            return ""
        return self.materials[index].name


@dataclass
class InvisWall:
    """An invisible wall described by a list of points."""

    name: str = ""
    verts: List[Vec3] = field(default_factory=list)


@dataclass
class Region:
    """A named, placed, rotated and scaled box region with two flag words."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    x_ext: float = 0.0
    y_ext: float = 0.0
    z_ext: float = 0.0
    x_rot: float = 0.0
    y_rot: float = 0.0
    z_rot: float = 0.0
    x_scale: float = 1.0
    y_scale: float = 1.0
    z_scale: float = 1.0
    flag1: int = 0
    flag2: int = 0
    name: str = ""
    alternate_name: str = ""

    def set_location(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def set_rotation(self, x: float, y: float, z: float) -> None:
        self.x_rot, self.y_rot, self.z_rot = x, y, z

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.x_scale, self.y_scale, self.z_scale = x, y, z

    def set_extents(self, x: float, y: float, z: float) -> None:
        self.x_ext, self.y_ext, self.z_ext = x, y, z

    def set_flags(self, flag1: int, flag2: int) -> None:
        self.flag1, self.flag2 = flag1, flag2


@dataclass
class ZoneOptions:
    """Zone-wide settings of a terrain."""

    name: str = ""
    min_lng: int = 0
    max_lng: int = 0
    min_lat: int = 0
    max_lat: int = 0
    min_extents: Vec3 = (0.0, 0.0, 0.0)
    max_extents: Vec3 = (0.0, 0.0, 0.0)
    units_per_vert: float = 0.0
    quads_per_tile: int = 0
    cover_map_input_size: int = 0
    layer_map_input_size: int = 0
    base_water_level: float = 0.0


@dataclass
class Terrain:
    """A terrain zone: tiles, water, walls, placeables, models and regions."""

    tiles: List[Any] = field(default_factory=list)
    quads_per_tile: int = 0
    units_per_vertex: float = 0.0
    water_sheets: List[Any] = field(default_factory=list)
    invis_walls: List[InvisWall] = field(default_factory=list)
    placeable_groups: List[Any] = field(default_factory=list)
    models: Dict[str, Geometry] = field(default_factory=dict)
    regions: List[Region] = field(default_factory=list)
    opts: ZoneOptions = field(default_factory=ZoneOptions)

    def add_tile(self, tile: Any) -> None:
        self.tiles.append(tile)

    def add_water_sheet(self, sheet: Any) -> None:
        self.water_sheets.append(sheet)

    def add_invis_wall(self, wall: InvisWall) -> None:
        self.invis_walls.append(wall)

    def add_placeable_group(self, group: Any) -> None:
        self.placeable_groups.append(group)

    def add_region(self, region: Region) -> None:
        self.regions.append(region)