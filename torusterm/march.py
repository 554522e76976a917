"""Ray generation and the fixed-step march used for every character cell."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .linalg import Vec3
from .scene import Scene
from .sdf import sd_torus, torus_normal


class MarchState(Enum):
    HIT = "hit"
    MISS = "miss"


@dataclass(frozen=True)
class MarchResult:
    state: MarchState
    diff: float = 0.0
    distance: float = 0.0
    point: Vec3 | None = None

    @property
    def hit(self) -> bool:
        return self.state is MarchState.HIT


MISS = MarchResult(MarchState.MISS)


def ray_direction(i: int, j: int, width: int, height: int, pixel_aspect: float) -> Vec3:
    """Unit ray for cell (i, j); +X is forward."""
    ux = (i / width) * 2.0 - 1.0
    uy = (j / height) * 2.0 - 1.0
    ux *= (width / height) * pixel_aspect
    return Vec3(1.0, ux, uy).normalize()


def march(origin: Vec3, direction: Vec3, scene: Scene, axis: Vec3) -> MarchResult:
    """Step along the ray in tube-radius increments until it nears the torus.

    The hit test is ``d < r``, which fires a whole tube radius before the
    surface; the silhouette thickness depends on it.
    """
    r = scene.tube_radius
    far = scene.far
    k = 0.0
    while k < far:
        p = origin.add(direction.scale(k))
        d = sd_torus(p, scene.torus, axis)
        if d < r:
            n = torus_normal(p, scene.torus, axis, scene.normal_eps)
            diff = max(n.dot(scene.light), scene.min_column)
            return MarchResult(MarchState.HIT, diff, k, p)
        k += r
    return MISS
