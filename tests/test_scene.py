import pytest

from torusterm.linalg import Vec2
from torusterm.scene import RedrawStrategy, RenderConfig, RenderMode, Scene
from torusterm.shading import SHORT_RAMP


def test_far_and_min_column():
    scene = Scene(ramp=SHORT_RAMP)
    assert scene.far == pytest.approx(4.9)
    assert scene.min_column == pytest.approx(1 / 9)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"torus": Vec2(0.0, 0.3)},
        {"torus": Vec2(1.2, -0.1)},
        {"ramp": b"@"},
        {"color_scale": 0.0},
        {"color_floor": 1.5},
    ],
)
def test_scene_validation(kwargs):
    with pytest.raises(ValueError):
        Scene(**kwargs)


def test_config_accepts_mode_names():
    config = RenderConfig(mode="glyph", redraw="inplace")
    assert config.mode is RenderMode.GLYPH_ONLY
    assert config.redraw is RedrawStrategy.IN_PLACE
    assert not config.colored


@pytest.mark.parametrize(
    "kwargs",
    [{"mode": "sepia"}, {"redraw": "diff"}, {"frames": -1}, {"delay": -0.1}],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)
