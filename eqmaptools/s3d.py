"""In-memory model of S3D zone data: BSP trees, textures and geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@dataclass
class BSPRegion:
    """A named region made of BSP region numbers."""

    flags: int = 0
    regions: List[int] = field(default_factory=list)
    name: str = ""
    extended_info: str = ""

    def add_region(self, region: int) -> None:
        self.regions.append(region)


@dataclass
class BSPNode:
    """A node of a BSP tree: a split plane and its two children."""

    number: int = 0
    normal: Vec3 = (0.0, 0.0, 0.0)
    split_dist: float = 0.0
    region: int = 0
    special: int = 0
    left: int = 0
    right: int = 0


@dataclass
class BSPTree:
    """The nodes of a BSP tree in file order."""

    nodes: List[BSPNode] = field(default_factory=list)

    def add_node(self, node: BSPNode) -> None:
        self.nodes.append(node)


@dataclass
class Texture:
    """An animated texture as a list of frame file names."""

    frames: List[str] = field(default_factory=list)


@dataclass
class TextureBrush:
    """A set of textures used together, with flags."""

    textures: List[Texture] = field(default_factory=list)
    flags: int = 0


@dataclass
class S3DVertex:
    """A mesh vertex with position, texture coordinate and normal."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    tex: Vec2 = (0.0, 0.0)
    nor: Vec3 = (0.0, 0.0, 0.0)


@dataclass
class S3DPolygon:
    """A triangle referring to three vertices and one texture index."""

    flags: int = 0
    verts: Tuple[int, int, int] = (0, 0, 0)
    tex: int = 0


@dataclass
class S3DGeometry:
    """A named mesh with an optional texture brush set."""

    name: str = ""
    vertices: List[S3DVertex] = field(default_factory=list)
    polygons: List[S3DPolygon] = field(default_factory=list)
    texture_brush_set: Optional[Any] = None

    def add_vertex(self, vertex: S3DVertex) -> None:
        self.vertices.append(vertex)

    def add_polygon(self, polygon: S3DPolygon) -> None:
        self.polygons.append(polygon)