"""A free-flying editor camera with its projection, view and picking rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]
Matrix = Tuple[Vec4, Vec4, Vec4, Vec4]

_IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

_BASE_SPEED = 50.0
_FAST_FACTOR = 6.0
_TURN_RATE = 0.005
_HALF_TURN = 3.14
_RAY_LENGTH = 10000000.0


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Sequence[float], s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Sequence[float]) -> Vec3:
    length = math.sqrt(_dot(a, a))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return (a[0] / length, a[1] / length, a[2] / length)


def _transform(matrix: Matrix, vector: Sequence[float]) -> Vec4:
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)  # type: ignore[return-value]


def _homogenise(vector: Vec4) -> Vec4:
    w = vector[3]
    if w == 0.0:
        raise ValueError("point at infinity")
    return (vector[0] / w, vector[1] / w, vector[2] / w, 1.0)


def perspective(fov: float, aspect: float, near: float, far: float) -> Matrix:
    """Right-handed perspective projection; ``fov`` is the vertical angle in radians.

    Matrices are row-major: ``matrix[row][column]``, applied to column vectors.
    """
    if aspect == 0.0:
        raise ValueError("aspect must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    depth = far - near
    return (
        (1.0 / (aspect * tan_half), 0.0, 0.0, 0.0),
        (0.0, 1.0 / tan_half, 0.0, 0.0),
        (0.0, 0.0, -(far + near) / depth, -(2.0 * far * near) / depth),
        (0.0, 0.0, -1.0, 0.0),
    )


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> Matrix:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    f = _normalize(_sub(center, eye))
    s = _normalize(_cross(f, up))
    u = _cross(s, f)
    return (
        (s[0], s[1], s[2], -_dot(s, eye)),
        (u[0], u[1], u[2], -_dot(u, eye)),
        (-f[0], -f[1], -f[2], _dot(f, eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


def invert_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Inverse of a 4x4 matrix; raises ValueError when it is singular."""
    rows = [list(map(float, row)) + [1.0 if i == j else 0.0 for j in range(4)]
            for i, row in enumerate(matrix)]
    if len(rows) != 4 or any(len(row) != 8 for row in rows):
        raise ValueError("matrix must be 4x4")
    for col in range(4):
        pivot = max(range(col, 4), key=lambda r: abs(rows[r][col]))
        if abs(rows[pivot][col]) < 1e-12:
            raise ValueError("matrix is singular")
        rows[col], rows[pivot] = rows[pivot], rows[col]
        lead = rows[col][col]
        rows[col] = [v / lead for v in rows[col]]
        for r in range(4):
            if r != col:
                factor = rows[r][col]
                if factor:
                    rows[r] = [a - factor * b for a, b in zip(rows[r], rows[col])]
    return tuple(tuple(row[4:]) for row in rows)  # type: ignore[return-value]


@dataclass
class Camera:
    """Position and orientation of the viewer, with the matrices last computed for them."""

    location: Vec3 = (0.0, 0.0, 0.0)
    hor_angle: float = _HALF_TURN
    ver_angle: float = 0.0
    fov: float = 45.0
    near_clip: float = 0.1
    far_clip: float = 15000.0
    view: Matrix = field(default=_IDENTITY)
    proj: Matrix = field(default=_IDENTITY)

    def direction(self) -> Vec3:
        """Unit vector the camera looks along."""
        cv = math.cos(self.ver_angle)
        return (
            cv * math.sin(self.hor_angle),
            math.sin(self.ver_angle),
            cv * math.cos(self.hor_angle),
        )

    def right(self) -> Vec3:
        """Horizontal unit vector to the camera's right."""
        angle = self.hor_angle - _HALF_TURN / 2.0
        return (math.sin(angle), 0.0, math.cos(angle))

    def up(self) -> Vec3:
        """The camera's up vector."""
        return _cross(self.right(), self.direction())

    def move(self, forward: float, strafe: float, delta_time: float, fast: bool = False) -> Vec3:
        """Move along the view (``forward``) and sideways (``strafe``); returns the new location."""
        speed = _BASE_SPEED * (_FAST_FACTOR if fast else 1.0)
        step = delta_time * speed
        location = self.location
        if forward:
            location = _add(location, _scale(self.direction(), step * forward))
        if strafe:
            location = _add(location, _scale(self.right(), step * strafe))
        self.location = location
        return location

    def rotate(self, dx: float, dy: float) -> None:
        """Turn by a cursor offset from the screen centre, in pixels."""
        self.hor_angle += _TURN_RATE * dx
        self.ver_angle += _TURN_RATE * dy

    def update_matrices(self, width: int, height: int) -> Tuple[Matrix, Matrix]:
        """Recompute projection and view for a viewport; returns ``(proj, view)``."""
        aspect = width / height if height > 0 else 1.0
        direction = self.direction()
        self.proj = perspective(self.fov, aspect, self.near_clip, self.far_clip)
        self.view = look_at(self.location, _add(self.location, direction), self.up())
        return self.proj, self.view

    def click_vectors(self, x: float, y: float, width: int, height: int) -> Tuple[Vec3, Vec3]:
        """A picking ray for a pixel (``y`` measured from the bottom).

        Returns the point on the near plane and the ray direction scaled to a great length.
        """
        if width <= 0 or height <= 0:
            raise ValueError("viewport must have a positive size")
        nx = (x / width - 0.5) * 2.0
        ny = (y / height - 0.5) * 2.0
        inverse_proj = invert_matrix(self.proj)
        inverse_view = invert_matrix(self.view)

        start_camera = _homogenise(_transform(inverse_proj, (nx, ny, -1.0, 1.0)))
        start_world = _homogenise(_transform(inverse_view, start_camera))
        end_camera = _homogenise(_transform(inverse_proj, (nx, ny, 0.0, 1.0)))
        end_world = _homogenise(_transform(inverse_view, end_camera))

        dir_world = _normalize(_sub(end_world, start_world))
        start = (start_world[0], start_world[1], start_world[2])
        return start, _scale(dir_world, _RAY_LENGTH)