# torusterm/scene.py
from dataclasses import dataclass, field
from enum import Enum

from . import settings
from .linalg import Vec2, Vec3
from .shading import PALETTES, RAMPS, Gradient, min_column


class RenderMode(str, Enum):
    GLYPH_ONLY = "glyph"
    GLYPH_AND_COLOR = "color"


class RedrawStrategy(str, Enum):
    FULL_CLEAR = "full"
    IN_PLACE = "inplace"


def _vec3(t) -> Vec3:
    return Vec3(*(float(c) for c in t))


@dataclass(frozen=True)
class Scene:
    """Everything the per-pixel march reads. Constant for a whole run."""

    torus: Vec2 = field(default_factory=lambda: Vec2(settings.MAJOR_RADIUS, settings.TUBE_RADIUS))
    origin: Vec3 = field(default_factory=lambda: _vec3(settings.CAMERA_ORIGIN))
    light: Vec3 = field(default_factory=lambda: _vec3(settings.LIGHT_DIRECTION).normalize())
    pixel_aspect: float = settings.PIXEL_ASPECT
    normal_eps: float = settings.NORMAL_EPS
    ramp: bytes = RAMPS[settings.RAMP]
    glyph_scale: float = settings.GLYPH_SCALE
    gradient: Gradient = PALETTES[settings.PALETTE]
    color_scale: float = settings.COLOR_SCALE
    color_floor: float = settings.COLOR_FLOOR

    def __post_init__(self):
        if self.torus.x <= 0 or self.torus.y <= 0:
            raise ValueError("Torus radii must be positive")
        if len(self.ramp) < 2:
            raise ValueError("Character ramp needs at least 2 glyphs")
        if self.color_scale <= 0:
            raise ValueError("color_scale must be positive")
        if not 0.0 <= self.color_floor <= 1.0:
            raise ValueError("color_floor must be in [0, 1]")

    @property
    def major_radius(self) -> float:
        return self.torus.x

    @property
    def tube_radius(self) -> float:
        return self.torus.y

    @property
    def far(self) -> float:
        """Loose upper bound on march distance."""
        return 2.0 * self.torus.x - self.origin.x

    @property
    def min_column(self) -> float:
        return min_column(self.ramp)


@dataclass
class RenderConfig:
    frames: int = settings.FRAME_COUNT
    delay: float = settings.FRAME_DELAY
    step_degrees: float = settings.ROTATION_STEP_DEG
    base_axis: Vec3 = field(default_factory=lambda: _vec3(settings.BASE_AXIS))
    mode: RenderMode = RenderMode(settings.RENDER_MODE)
    redraw: RedrawStrategy = RedrawStrategy(settings.REDRAW)

    def __post_init__(self):
        self.mode = RenderMode(self.mode)
        self.redraw = RedrawStrategy(self.redraw)
        if self.frames < 0:
            raise ValueError("frames must be >= 0")
        if self.delay < 0:
            raise ValueError("delay must be >= 0")

    @property
    def colored(self) -> bool:
        return self.mode is RenderMode.GLYPH_AND_COLOR
