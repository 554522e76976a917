import pytest

from torusterm.shading import (
    HEAT,
    LONG_RAMP,
    OCEAN,
    SHORT_RAMP,
    Gradient,
    GradientStop,
    color_for,
    glyph_for,
    glyph_index,
    intensity,
    min_column,
)


class TestGlyphMapping:
    def test_clamps_low(self):
        assert glyph_index(0.0, len(LONG_RAMP)) == 0
        assert glyph_index(-3.0, len(LONG_RAMP)) == 0
        assert glyph_for(-1.0) == ord(" ")

    def test_clamps_high(self):
        assert glyph_index(50.0, len(LONG_RAMP)) == len(LONG_RAMP) - 1
        assert glyph_for(5.0, SHORT_RAMP) == ord("@")

    def test_monotonic(self):
        last = -1
        for n in range(0, 200):
            idx = glyph_index(n / 100.0, len(SHORT_RAMP))
            assert idx >= last
            last = idx

    def test_scale_and_rounding(self):
        assert glyph_index(0.1, 17) == 2
        assert glyph_index(0.1, 17, scale=10.0) == 1
        assert glyph_for(0.577, LONG_RAMP) == ord("9")

    def test_hit_never_renders_background(self):
        for ramp in (LONG_RAMP, SHORT_RAMP):
            assert glyph_for(min_column(ramp), ramp) != ord(" ")


class TestGradient:
    def test_endpoints_exact(self):
        assert HEAT.color_at(0.0) == (0, 0, 50)
        assert HEAT.color_at(1.0) == (255, 255, 255)
        assert OCEAN.color_at(0.0) == OCEAN.stops[0].color
        assert OCEAN.color_at(1.0) == OCEAN.stops[-1].color

    def test_midpoint_is_mean(self):
        for lo, hi in zip(HEAT.stops, HEAT.stops[1:]):
            mid = HEAT.color_at((lo.threshold + hi.threshold) / 2)
            for c, a, b in zip(mid, lo.color, hi.color):
                assert abs(c - (a + b) / 2) <= 1

    def test_out_of_range_is_clamped(self):
        assert HEAT.color_at(-0.5) == (0, 0, 50)
        assert HEAT.color_at(3.0) == (255, 255, 255)

    def test_stop_tuples_accepted(self):
        g = Gradient([(0.0, (0, 0, 0)), GradientStop(0.5, (10, 10, 10)), (1.0, (20, 20, 20))])
        assert g.color_at(0.25) == (5, 5, 5)
        assert len(g) == 3

    @pytest.mark.parametrize(
        "stops",
        [
            [(0.0, (0, 0, 0)), (1.0, (255, 255, 255))],
            [(0.1, (0, 0, 0)), (0.5, (1, 1, 1)), (1.0, (2, 2, 2))],
            [(0.0, (0, 0, 0)), (0.5, (1, 1, 1)), (0.9, (2, 2, 2))],
            [(0.0, (0, 0, 0)), (0.7, (1, 1, 1)), (0.5, (2, 2, 2)), (1.0, (3, 3, 3))],
            [(0.0, (0, 0, 0)), (0.5, (300, 1, 1)), (1.0, (2, 2, 2))],
        ],
    )
    def test_invalid_tables_rejected(self, stops):
        with pytest.raises(ValueError):
            Gradient(stops)


def test_intensity_scale_and_floor():
    assert intensity(0.5) == pytest.approx(0.05)
    assert intensity(0.5, scale=1.5) == pytest.approx(1 / 3)
    assert intensity(0.0, floor=0.1) == 0.1
    assert intensity(40.0) == 1.0


def test_color_for_uses_scale():
    assert color_for(0.0) == HEAT.color_at(0.0)
    assert color_for(10.0) == (255, 255, 255)
    assert color_for(1.5, scale=1.5) == (255, 255, 255)
