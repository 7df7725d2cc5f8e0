# tests/test_color_luminance.py


from __future__ import annotations

import importlib

import pytest

"""
luminance tests
===============

Does: Validate gamma expansion, Rec. 709 weighting, bounds, channel ordering,
      monotonicity and input coercion of relative_luminance().
"""

lum = importlib.import_module("relative_luminance.color.luminance")
types_ = importlib.import_module("relative_luminance.color.types")

Color = types_.Color
Rgb = types_.Rgb

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


# ──────────────────────────────────────────────────────────────────────────────
# Gamma expansion
# ──────────────────────────────────────────────────────────────────────────────
def test_srgb_to_linear_endpoints():
    assert lum.srgb_to_linear(0.0) == 0.0
    assert lum.srgb_to_linear(1.0) == pytest.approx(1.0, abs=1e-12)


def test_srgb_to_linear_uses_linear_segment_up_to_threshold():
    t = lum.LINEAR_THRESHOLD
    assert lum.srgb_to_linear(t) == pytest.approx(t / 12.92)
    # 10/255 sits just under the breakpoint
    assert lum.srgb_to_linear(10 / 255) == pytest.approx((10 / 255) / 12.92)


def test_srgb_to_linear_power_curve_above_threshold():
    v = 128 / 255
    assert lum.srgb_to_linear(v) == pytest.approx(((v + 0.055) / 1.055) ** 2.4)
    assert lum.srgb_to_linear(v) == pytest.approx(0.21586, abs=1e-4)


def test_linear_rgb_expands_each_channel():
    out = lum.linear_rgb(Color(0, 128, 255))
    assert out.r == 0.0
    assert out.g == pytest.approx(0.21586, abs=1e-4)
    assert out.b == pytest.approx(1.0)


# ──────────────────────────────────────────────────────────────────────────────
# Reference values
# ──────────────────────────────────────────────────────────────────────────────
def test_black_is_zero_and_white_is_one():
    assert lum.relative_luminance(BLACK) == 0.0
    assert lum.relative_luminance(WHITE) == 1.0


@pytest.mark.parametrize(
    "color,expected",
    [
        (Color(255, 0, 0), 0.2126),
        (Color(0, 255, 0), 0.7152),
        (Color(0, 0, 255), 0.0722),
        (Color(255, 255, 0), 0.9278),
        (Color(0, 255, 255), 0.7874),
        (Color(255, 0, 255), 0.2848),
        (Color(128, 128, 128), 0.21586),
    ],
)
def test_reference_colors(color, expected):
    assert lum.relative_luminance(color) == pytest.approx(expected, abs=1e-4)


def test_green_dominates_then_red_then_blue():
    g = lum.relative_luminance(Color(0, 255, 0))
    r = lum.relative_luminance(Color(255, 0, 0))
    b = lum.relative_luminance(Color(0, 0, 255))
    assert g > r > b


def test_result_stays_in_unit_interval_over_grid():
    steps = range(0, 256, 51)
    for r in steps:
        for g in steps:
            for b in steps:
                value = lum.relative_luminance(Color(r, g, b))
                assert 0.0 <= value <= 1.0


@pytest.mark.parametrize("channel", [0, 1, 2])
@pytest.mark.parametrize("base", [(0, 0, 0), (37, 180, 90), (255, 255, 255)])
def test_monotonic_in_each_channel(channel, base):
    previous = -1.0
    for v in range(256):
        rgb = list(base)
        rgb[channel] = v
        value = lum.relative_luminance(Color(*rgb))
        assert value >= previous
        previous = value


def test_idempotent():
    c = Color(12, 200, 77)
    assert lum.relative_luminance(c) == lum.relative_luminance(c)


# ──────────────────────────────────────────────────────────────────────────────
# Inputs & weights
# ──────────────────────────────────────────────────────────────────────────────
def test_accepts_rgb_tuple_and_normalized_rgb():
    expected = lum.relative_luminance(Color(0, 255, 0))
    assert lum.relative_luminance((0, 255, 0)) == expected
    assert lum.relative_luminance([0, 255, 0]) == expected
    assert lum.relative_luminance(Rgb(0.0, 1.0, 0.0)) == expected


def test_accepts_custom_luminance_source():
    class Swatch:
        def __init__(self, r, g, b):
            self.rgb = (r, g, b)

        def luminance_rgb(self):
            return Rgb(*(c / 255.0 for c in self.rgb))

    assert lum.relative_luminance(Swatch(0, 0, 0)) == 0.0
    assert lum.relative_luminance(Swatch(255, 0, 0)) == pytest.approx(0.2126)


def test_raw_triple_out_of_range_raises():
    with pytest.raises(types_.InvalidChannelValue):
        lum.relative_luminance((256, 0, 0))


@pytest.mark.parametrize("bad", ["#ffffff", 12, (1, 2), None])
def test_rejects_non_color_inputs(bad):
    with pytest.raises(TypeError):
        lum.relative_luminance(bad)


def test_custom_weights():
    equal = types_.LuminanceWeights(red=1 / 3, green=1 / 3, blue=1 / 3)
    assert lum.relative_luminance(Color(255, 0, 0), equal) == pytest.approx(1 / 3)
    assert lum.relative_luminance(Color(0, 0, 255), equal) == pytest.approx(1 / 3)
