"""Small immutable vector types used by the torus renderer.

``Vec3`` carries points, directions and axes; ``Vec2`` only bundles the
(major radius, tube radius) pair of the torus. Both are frozen dataclasses,
so every operation returns a new value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    def add(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> "Vec3":
        return Vec3(self.x * k, self.y * k, self.z * k)

    __add__ = add
    __sub__ = sub
    __mul__ = scale
    __rmul__ = scale

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vec3":
        n = self.length()
        if n <= 0:
            # zero vector stays as is
            return self
        return self.scale(1.0 / n)


ZERO = Vec3(0.0, 0.0, 0.0)


def rotate_about_z(v: Vec3, angle: float) -> Vec3:
    """Rotate the (y, z) components of ``v`` by ``angle`` radians, keeping x."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x, c * v.y - s * v.z, s * v.y + c * v.z)


def axis_for_frame(frame: int, step_degrees: float, base: Vec3 | None = None) -> Vec3:
    """Torus orientation axis for ``frame``.

    The base axis (default ``(1, 1, 1)``) is spun by ``frame * step_degrees``.
    The result depends only on the frame index, never on earlier frames.
    """
    if base is None:
        base = Vec3(1.0, 1.0, 1.0)
    angle = frame * step_degrees * (math.pi / 180.0)
    return rotate_about_z(base.normalize(), angle).normalize()
