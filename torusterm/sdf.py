from typing import Callable

from .linalg import Vec2, Vec3
from .settings import NORMAL_EPS

Sdf = Callable[[Vec3], float]


# --- Signed Distance Functions (SDFs) ---


def sd_torus(p: Vec3, params: Vec2, axis: Vec3) -> float:
    """SDF for a torus whose ring plane is orthogonal to ``axis``.

    ``params`` is (major radius, tube radius). ``axis`` must be unit length.
    """
    # nearest point on the ring center-line
    ring = p.sub(axis.scale(p.dot(axis))).normalize().scale(params.x)
    return ring.sub(p).length() - params.y


def sd_sphere(p: Vec3, radius: float) -> float:
    """SDF for a sphere centred on the origin."""
    return p.length() - radius


# --- Normals ---


def estimate_normal(sdf: Sdf, p: Vec3, eps: float = NORMAL_EPS) -> Vec3:
    """Central-difference gradient of ``sdf`` at ``p``, normalized.

    Costs six SDF evaluations.
    """
    dx = sdf(Vec3(p.x + eps, p.y, p.z)) - sdf(Vec3(p.x - eps, p.y, p.z))
    dy = sdf(Vec3(p.x, p.y + eps, p.z)) - sdf(Vec3(p.x, p.y - eps, p.z))
    dz = sdf(Vec3(p.x, p.y, p.z + eps)) - sdf(Vec3(p.x, p.y, p.z - eps))
    return Vec3(dx, dy, dz).normalize()


def torus_normal(p: Vec3, params: Vec2, axis: Vec3, eps: float = NORMAL_EPS) -> Vec3:
    return estimate_normal(lambda q: sd_torus(q, params, axis), p, eps)
