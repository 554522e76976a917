"""Frame buffer and the per-frame render pass."""

from __future__ import annotations

import logging

import numpy as np

from .linalg import Vec3
from .march import march, ray_direction
from .scene import Scene
from .shading import color_for, glyph_for

log = logging.getLogger(__name__)

BACKGROUND = ord(" ")


class FrameBuffer:
    """Row-major grid of ``{glyph, color}`` cells.

    Storage is allocated once; :meth:`clear` resets it in place.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"FrameBuffer expects a positive size, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.glyphs = np.full((self.height, self.width), BACKGROUND, dtype=np.uint8)
        self.colors = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.has_color = np.zeros((self.height, self.width), dtype=bool)

    @property
    def size(self) -> int:
        return self.width * self.height

    def clear(self):
        self.glyphs.fill(BACKGROUND)
        self.colors.fill(0)
        self.has_color.fill(False)

    def put(self, i: int, j: int, glyph: int, color=None):
        self.glyphs[j, i] = glyph
        if color is not None:
            self.colors[j, i] = color
            self.has_color[j, i] = True

    def glyph(self, i: int, j: int) -> str:
        return chr(self.glyphs[j, i])

    def color(self, i: int, j: int):
        """RGB tuple for the cell, or None when unset."""
        if not self.has_color[j, i]:
            return None
        return tuple(int(c) for c in self.colors[j, i])

    def row_cells(self, j: int):
        for i in range(self.width):
            yield self.glyph(i, j), self.color(i, j)

    def to_lines(self) -> list[str]:
        return [self.glyphs[j].tobytes().decode("ascii") for j in range(self.height)]

    def hits(self) -> int:
        return int(np.count_nonzero(self.glyphs != BACKGROUND))

    def __repr__(self):
        return f"FrameBuffer({self.width}x{self.height})"


def render_frame(buf: FrameBuffer, scene: Scene, axis: Vec3, colored: bool = True) -> FrameBuffer:
    """Clear ``buf`` and march every cell against the torus oriented by ``axis``."""
    buf.clear()
    w, h = buf.width, buf.height
    for j in range(h):
        for i in range(w):
            rd = ray_direction(i, j, w, h, scene.pixel_aspect)
            res = march(scene.origin, rd, scene, axis)
            if not res.hit:
                continue
            glyph = glyph_for(res.diff, scene.ramp, scene.glyph_scale)
            color = None
            if colored:
                color = color_for(res.diff, scene.gradient, scene.color_scale, scene.color_floor)
            buf.put(i, j, glyph, color)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("rendered %s, %d lit cells", buf, buf.hits())
    return buf
