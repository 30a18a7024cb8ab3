"""A flat AABB tree over triangles, split on the XZ plane into small chunks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

Vec2 = Tuple[float, float]
Triangle = Tuple[int, int, int]

_EPSILON = 1e-6


@dataclass
class ChunkyTriMeshNode:
    """A tree node; ``i >= 0`` marks a leaf, otherwise ``-i`` is the escape offset."""

    bmin: Vec2 = (0.0, 0.0)
    bmax: Vec2 = (0.0, 0.0)
    i: int = 0
    n: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.i >= 0


@dataclass
class _BoundsItem:
    bmin: Vec2
    bmax: Vec2
    index: int


def _extents(items: Sequence[_BoundsItem]) -> Tuple[Vec2, Vec2]:
    return (
        (min(it.bmin[0] for it in items), min(it.bmin[1] for it in items)),
        (max(it.bmax[0] for it in items), max(it.bmax[1] for it in items)),
    )


def _overlap_rect(amin: Sequence[float], amax: Sequence[float], bmin: Vec2, bmax: Vec2) -> bool:
    return all(not (amin[k] > bmax[k] or amax[k] < bmin[k]) for k in range(2))


def _overlap_segment(p: Sequence[float], q: Sequence[float], bmin: Vec2, bmax: Vec2) -> bool:
    tmin, tmax = 0.0, 1.0
    for start, end, lo, hi in zip(p, q, bmin, bmax):
        d = end - start
        if abs(d) < _EPSILON:
            if start < lo or start > hi:
                return False
        else:
            ood = 1.0 / d
            t1 = (lo - start) * ood
            t2 = (hi - start) * ood
            if t1 > t2:
                t1, t2 = t2, t1
            tmin = max(tmin, t1)
            tmax = min(tmax, t2)
            if tmin > tmax:
                return False
    return True


@dataclass
class ChunkyTriMesh:
    """Triangles reordered into chunks, with the tree over them stored depth first."""

    nodes: List[ChunkyTriMeshNode] = field(default_factory=list)
    tris: List[Triangle] = field(default_factory=list)
    max_tris_per_chunk: int = 0

    @classmethod
    def build(
        cls,
        verts: Sequence[Sequence[float]],
        tris: Sequence[Sequence[int]],
        tris_per_chunk: int,
    ) -> "ChunkyTriMesh":
        """Partition triangles so that each leaf holds at most ``tris_per_chunk`` of them."""
        if tris_per_chunk < 1:
            raise ValueError("tris_per_chunk must be at least 1")
        in_tris: List[Triangle] = []
        for tri in tris:
            a, b, c = tri
            in_tris.append((int(a), int(b), int(c)))

        items = []
        for index, tri in enumerate(in_tris):
            xs = [verts[v][0] for v in tri]
            zs = [verts[v][2] for v in tri]
            items.append(_BoundsItem((min(xs), min(zs)), (max(xs), max(zs)), index))

        mesh = cls()
        if not items:
            return mesh

        nchunks = (len(in_tris) + tris_per_chunk - 1) // tris_per_chunk
        max_nodes = nchunks * 4
        mesh._subdivide(items, 0, len(items), tris_per_chunk, max_nodes, in_tris)
        mesh.max_tris_per_chunk = max((node.n for node in mesh.nodes if node.is_leaf), default=0)
        return mesh

    def _subdivide(
        self,
        items: List[_BoundsItem],
        imin: int,
        imax: int,
        per_chunk: int,
        max_nodes: int,
        in_tris: List[Triangle],
    ) -> None:
        if len(self.nodes) >= max_nodes:
            return
        icur = len(self.nodes)
        inum = imax - imin
        bmin, bmax = _extents(items[imin:imax])
        node = ChunkyTriMeshNode(bmin=bmin, bmax=bmax)
        self.nodes.append(node)

        if inum <= per_chunk:
            node.i = len(self.tris)
            node.n = inum
            self.tris.extend(in_tris[it.index] for it in items[imin:imax])
            return

        axis = 1 if (bmax[1] - bmin[1]) > (bmax[0] - bmin[0]) else 0
        items[imin:imax] = sorted(items[imin:imax], key=lambda it: it.bmin[axis])
        isplit = imin + inum // 2
        self._subdivide(items, imin, isplit, per_chunk, max_nodes, in_tris)
        self._subdivide(items, isplit, imax, per_chunk, max_nodes, in_tris)
        node.i = -(len(self.nodes) - icur)

    def _traverse(self, test, max_ids: Optional[int]) -> List[int]:
        ids: List[int] = []
        i = 0
        while i < len(self.nodes):
            node = self.nodes[i]
            overlap = test(node)
            if node.is_leaf and overlap and (max_ids is None or len(ids) < max_ids):
                ids.append(i)
            if overlap or node.is_leaf:
                i += 1
            else:
                i += -node.i
        return ids

    def chunks_overlapping_rect(
        self, bmin: Sequence[float], bmax: Sequence[float], max_ids: Optional[int] = None
    ) -> List[int]:
        """Indices of leaf nodes whose XZ bounds overlap the rectangle."""
        return self._traverse(lambda node: _overlap_rect(bmin, bmax, node.bmin, node.bmax), max_ids)

    def chunks_overlapping_segment(
        self, p: Sequence[float], q: Sequence[float], max_ids: Optional[int] = None
    ) -> List[int]:
        """Indices of leaf nodes whose XZ bounds the segment from ``p`` to ``q`` crosses."""
        return self._traverse(lambda node: _overlap_segment(p, q, node.bmin, node.bmax), max_ids)

    def chunk_triangles(self, node_index: int) -> List[Triangle]:
        """The triangles held by a leaf node."""
        if node_index < 0 or node_index >= len(self.nodes):
            raise IndexError(f"node {node_index} out of range")
        node = self.nodes[node_index]
        if not node.is_leaf:
            raise ValueError(f"node {node_index} is not a leaf")
        return self.tris[node.i : node.i + node.n]