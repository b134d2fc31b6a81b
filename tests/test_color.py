"""Tests for color utilities."""

import pytest

from hue_tween.color import hex_to_hsv, hsv_to_hex, lerp_hsv, resolve_color
from hue_tween.core.types import HSV, RGB

RED = HSV(0.0, 1.0, 1.0)
BLUE = HSV(0.6, 1.0, 1.0)


def test_hex_round_trip_primary():
    assert hex_to_hsv("#FF0000") == RED
    assert hex_to_hsv("F00") == RED
    assert hsv_to_hex(RED) == "#FF0000"


@pytest.mark.parametrize("bad", ["#12", "#GGGGGG", "#1234567"])
def test_invalid_hex(bad):
    with pytest.raises(ValueError):
        hex_to_hsv(bad)


def test_resolve_named_color_is_case_insensitive():
    assert resolve_color(" Red ") == RED


def test_resolve_hsv_sequence_clamps():
    color = resolve_color([1.25, 2.0, -1.0])

    assert color.hue == pytest.approx(0.25)
    assert color.saturation == 1.0
    assert color.value == 0.0


@pytest.mark.parametrize("bad", ["chartreuse-ish", [1, 2], ["a", 1, 1], 42])
def test_resolve_rejects_garbage(bad):
    with pytest.raises(ValueError):
        resolve_color(bad)


def test_lerp_endpoints():
    assert lerp_hsv(RED, BLUE, 0.0).hue == pytest.approx(0.0)
    assert lerp_hsv(RED, BLUE, 1.0).hue == pytest.approx(0.6)


def test_lerp_takes_shortest_hue_path():
    # 0.9 -> 0.1 crosses red rather than going through green
    mid = lerp_hsv(HSV(0.9, 1.0, 1.0), HSV(0.1, 1.0, 1.0), 0.5)
    assert mid.hue == pytest.approx(0.0, abs=1e-9) or mid.hue == pytest.approx(1.0)


def test_lerp_clamps_ratio():
    assert lerp_hsv(RED, BLUE, 5.0) == lerp_hsv(RED, BLUE, 1.0)
    assert lerp_hsv(RED, BLUE, -1.0) == lerp_hsv(RED, BLUE, 0.0)


def test_lerp_to_white_keeps_hue():
    white = HSV(0.0, 0.0, 1.0)
    mid = lerp_hsv(BLUE, white, 0.5)

    assert mid.hue == pytest.approx(0.6)
    assert mid.saturation == pytest.approx(0.5)


def test_rgb_from_hsv():
    assert RGB.from_hsv(0.0, 1.0, 1.0) == RGB(255, 0, 0)
    assert RGB(255, 255, 255).brightness == 1.0
