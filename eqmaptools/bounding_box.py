"""Axis-aligned bounding boxes in three dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

Vec3 = Tuple[float, float, float]

_ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def _vec3(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


@dataclass
class AlignedBoundingBox:
    """A box whose faces are parallel to the coordinate planes."""

    center: Vec3 = _ORIGIN
    radius: Vec3 = _ORIGIN
    minimum: Vec3 = _ORIGIN
    maximum: Vec3 = _ORIGIN

    @classmethod
    def from_corners(cls, minimum: Sequence[float], maximum: Sequence[float]) -> "AlignedBoundingBox":
        """Build a box from its lowest and highest corners."""
        lo = _vec3(minimum)
        hi = _vec3(maximum)
        center = _vec3([(h + l) / 2 for l, h in zip(lo, hi)])
        radius = _vec3([h - c for h, c in zip(hi, center)])
        return cls(center=center, radius=radius, minimum=lo, maximum=hi)

    @classmethod
    def from_center(
        cls,
        center: Sequence[float],
        rx: float,
        ry: Optional[float] = None,
        rz: Optional[float] = None,
    ) -> "AlignedBoundingBox":
        """Build a box from a center and either one radius or one radius per axis."""
        if ry is None and rz is None:
            ry = rz = rx
        elif ry is None or rz is None:
            raise TypeError("give either one radius or all three")
        c = _vec3(center)
        radius = _vec3((rx, ry, rz))
        minimum = _vec3([p - r for p, r in zip(c, radius)])
        maximum = _vec3([p + r for p, r in zip(c, radius)])
        return cls(center=c, radius=radius, minimum=minimum, maximum=maximum)

    def contains(self, point: Sequence[float]) -> bool:
        """Whether the point lies inside the box or on its surface."""
        return all(lo <= p <= hi for p, lo, hi in zip(point, self.minimum, self.maximum))

    def intersects_aabb(self, other: "AlignedBoundingBox") -> bool:
        """Whether this box touches or overlaps another one."""
        return all(
            not (hi < other_lo or lo > other_hi)
            for lo, hi, other_lo, other_hi in zip(
                self.minimum, self.maximum, other.minimum, other.maximum
            )
        )

    def intersects_sphere(self, center: Sequence[float], diameter: float) -> bool:
        """Whether the squared distance from the point to the box is at most ``diameter``."""
        dist = 0.0
        for c, lo, hi in zip(center, self.minimum, self.maximum):
            if c < lo:
                dist += (c - lo) * (c - lo)
            elif c > hi:
                dist += (c - hi) * (c - hi)
        return dist <= diameter