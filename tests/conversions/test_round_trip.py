"""Conversions out of a space and back again return the input."""
import pytest

from tincture.conversions import (
    hex_to_rgb,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
)


@pytest.mark.parametrize("hsl", [[348, 0.78, 0.53], [127, 0.44, 0.88, 1.0], [0, 0.23, 0.45]])
def test_hsl_rgb_hsl(hsl):
    assert rgb_to_hsl(hsl_to_rgb(hsl)) == pytest.approx(hsl, abs=1e-5)


@pytest.mark.parametrize("rgb", [[243, 122, 84], [128, 128, 128, 0.5], [0, 0, 0], [255, 128, 0, 0.75]])
def test_rgb_hsl_rgb(rgb):
    assert hsl_to_rgb(rgb_to_hsl(rgb)) == pytest.approx(rgb, abs=1e-5)


@pytest.mark.parametrize("hsl", [[205, 0.39, 0.60], [301, 1.0, 0.4, 1.0]])
def test_hsl_hsv_hsl(hsl):
    assert hsv_to_hsl(hsl_to_hsv(hsl)) == pytest.approx(hsl, abs=1e-5)


def test_rgb_hsv_rgb():
    rgb = [114, 160, 194, 1.0]
    assert hsv_to_rgb(rgb_to_hsv(rgb)) == pytest.approx(rgb, abs=1e-5)


def test_degenerate_inputs_lose_hue_and_saturation():
    assert hsv_to_hsl(hsl_to_hsv([280, 0.39, 0])) == [280, 0, 0]
    assert hsl_to_hsv(hsv_to_hsl([83, 0.56, 0])) == [83, 0, 0]
    assert rgb_to_hsl(hsl_to_rgb([10, 0.5, 0])) == [0, 0, 0]
    assert rgb_to_hsl(hsl_to_rgb([250, 0.3, 1])) == [0, 0, 1]


@pytest.mark.parametrize("value", ["#a4c639f0", "#030122", "#ffffffff", "#00000000"])
def test_hex_rgb_hex(value):
    assert rgb_to_hex(hex_to_rgb(value)) == value


def test_through_every_space():
    value = "#a4c639f0"
    rgb = hsl_to_rgb(hsv_to_hsl(rgb_to_hsv(hex_to_rgb(value))))
    assert rgb_to_hex(rgb) == value
