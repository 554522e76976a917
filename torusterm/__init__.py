"""Signed-distance torus ray marcher that draws to a text terminal."""

__all__ = [
    "Vec2",
    "Vec3",
    "rotate_about_z",
    "axis_for_frame",
    "sd_torus",
    "torus_normal",
    "estimate_normal",
    "ray_direction",
    "march",
    "MarchState",
    "MarchResult",
    "glyph_for",
    "color_for",
    "Gradient",
    "GradientStop",
    "Scene",
    "RenderConfig",
    "RenderMode",
    "RedrawStrategy",
    "FrameBuffer",
    "render_frame",
    "run",
]

import logging as _logging

from .driver import run
from .frame import FrameBuffer, render_frame
from .linalg import Vec2, Vec3, axis_for_frame, rotate_about_z
from .march import MarchResult, MarchState, march, ray_direction
from .scene import RedrawStrategy, RenderConfig, RenderMode, Scene
from .sdf import estimate_normal, sd_torus, torus_normal
from .shading import Gradient, GradientStop, color_for, glyph_for

_logging.getLogger("torusterm").addHandler(_logging.NullHandler())
