"""Map the march's diffuse term to a glyph and to an RGB color.

Both tables here are immutable: character ramps are ``bytes`` ordered from
low to high visual density, and palettes are tuples of gradient stops ordered
by threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# Character ramps, darkest first
LONG_RAMP = b" .:!/r(l1Z4H9W8$@"
SHORT_RAMP = b" .:-=+*#%@"

RAMPS = {"long": LONG_RAMP, "short": SHORT_RAMP}

RGB = tuple[int, int, int]


def clamp(x: float, a: float, b: float) -> float:
    return a if x < a else b if x > b else x


def min_column(ramp: bytes) -> float:
    """Smallest diffuse term a hit may contribute, one ramp step."""
    return 1.0 / (len(ramp) - 1)


def glyph_index(diff: float, ramp_length: int, scale: float = 20.0) -> int:
    return int(clamp(round(diff * scale), 0, ramp_length - 1))


def glyph_for(diff: float, ramp: bytes = LONG_RAMP, scale: float = 20.0) -> int:
    """Ramp byte for ``diff``."""
    return ramp[glyph_index(diff, len(ramp), scale)]


# --- Color ---


@dataclass(frozen=True)
class GradientStop:
    threshold: float
    color: RGB


class Gradient:
    """Piecewise-linear palette over [0, 1].

    The first stop must sit at 0.0 and the last at 1.0, with at least three
    stops in non-decreasing threshold order.
    """

    def __init__(self, stops: Iterable[GradientStop | tuple[float, RGB]]):
        self.stops = tuple(s if isinstance(s, GradientStop) else GradientStop(*s) for s in stops)
        if len(self.stops) < 3:
            raise ValueError("Gradient expects at least 3 stops")
        if self.stops[0].threshold != 0.0 or self.stops[-1].threshold != 1.0:
            raise ValueError("Gradient stops must span 0.0 to 1.0")
        for a, b in zip(self.stops, self.stops[1:]):
            if b.threshold < a.threshold:
                raise ValueError("Gradient thresholds must be non-decreasing")
        for s in self.stops:
            if len(s.color) != 3 or any(not 0 <= c <= 255 for c in s.color):
                raise ValueError(f"Bad RGB value {s.color!r}")

    def __len__(self) -> int:
        return len(self.stops)

    def color_at(self, x: float) -> RGB:
        x = clamp(x, 0.0, 1.0)
        last = self.stops[-1]
        if x >= last.threshold:
            return last.color
        for lo, hi in zip(self.stops, self.stops[1:]):
            if lo.threshold <= x <= hi.threshold:
                span = hi.threshold - lo.threshold
                if span <= 0:
                    return hi.color
                t = (x - lo.threshold) / span
                return tuple(round(a + (b - a) * t) for a, b in zip(lo.color, hi.color))
        return last.color

    def __repr__(self):
        return f"Gradient({len(self.stops)} stops)"


# deep blue -> cyan/green -> yellow/red -> white
HEAT = Gradient(
    [
        (0.000, (0, 0, 50)),
        (0.125, (0, 0, 200)),
        (0.250, (0, 150, 200)),
        (0.375, (0, 255, 0)),
        (0.500, (255, 255, 0)),
        (0.625, (255, 200, 0)),
        (0.750, (255, 0, 0)),
        (0.875, (255, 150, 150)),
        (1.000, (255, 255, 255)),
    ]
)

OCEAN = Gradient(
    [
        (0.0, (0, 20, 80)),
        (0.5, (0, 180, 220)),
        (1.0, (235, 255, 255)),
    ]
)

PALETTES = {"heat": HEAT, "ocean": OCEAN}


def intensity(diff: float, scale: float = 10.0, floor: float = 0.0) -> float:
    return clamp(diff / scale, floor, 1.0)


def color_for(diff: float, gradient: Gradient = HEAT, scale: float = 10.0, floor: float = 0.0) -> RGB:
    return gradient.color_at(intensity(diff, scale, floor))
