import math

import pytest

from tincture.errors import InvalidComponentCount
from tincture.samples import NAMED_COLORS, rgb_for_name
from tincture.types import ColorMode, CssFormat
from tincture.types.color_types import component_names, is_hue_space, to_mode
from tincture.utils import (
    alpha_or_default,
    charkeys,
    check_components,
    clamp_to,
    detect_mode,
    format_number,
    get_dimension,
    is_hsl,
    is_hsv,
    is_rgb,
    match_css_string,
    match_hex_string,
    round_half_up,
    round_to,
    value_or_default,
)


def test_none_dimension():
    assert get_dimension(None) == 0


def test_sized_dimension():
    assert get_dimension([1, 2, 3]) == 3
    assert get_dimension((1, 2)) == 2
    assert get_dimension({"a": 1, "b": 2}) == 2


def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(3.14) == 1


def test_check_components():
    check_components([1, 2, 3])
    check_components((1, 2, 3, 0.5))
    for bad in ([1, 2], [1, 2, 3, 4, 5], None, 3, "abc", "abcd"):
        with pytest.raises(InvalidComponentCount):
            check_components(bad)


def test_defaults():
    assert value_or_default(None, 5) == 5
    assert value_or_default(0, 5) == 0
    assert alpha_or_default(None) == 1.0
    assert alpha_or_default(math.nan) == 1.0
    assert alpha_or_default(0) == 0
    assert alpha_or_default(0.25) == 0.25


def test_clamp_to():
    assert clamp_to(300, 255) == 255.0
    assert clamp_to(-3, 255) == 0.0
    assert clamp_to(0.5, 1) == 0.5
    assert isinstance(clamp_to(10, 255), float)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_round_to():
    assert round_to(209.387755, 2) == 209.39
    assert round_to(0.125, 2) == 0.13
    assert round_to(19.2156, 2) == 19.22


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(0) == "0"
    assert format_number(0.5) == "0.5"
    assert format_number(209.39) == "209.39"


def test_match_hex_string():
    for value in ("#fff", "fff", "#F0F1F2", "#00000000"):
        assert match_hex_string(value)
    for value in ("#ff", "#fffff", "#ggg", "fff ", None, 255):
        assert not match_hex_string(value)


def test_match_css_string():
    for value in ("rgb(", "rgba(1,2,3,4)", "HSL(1,2%,3%)", "hsla(0,0,0,0)"):
        assert match_css_string(value)
    for value in ("hsv(1,2,3)", " rgb(1,2,3)", "rgb 1 2 3", None):
        assert not match_css_string(value)


def test_charkeys():
    assert charkeys({"red": 1, "green": 2, "blue": 3}) == {"r": 1, "g": 2, "b": 3}
    assert charkeys({"h": 1, "saturation": 2, "v": 3, "alpha": 4}) == {"h": 1, "s": 2, "v": 3, "a": 4}


def test_charkeys_rejects_unknown_keys():
    assert charkeys({"red": 1, "green": 2, "blue": 3, "brightness": 4}) is None
    assert charkeys({"rouge": 1, "gris": 2, "bleu": 3}) is None
    assert charkeys({"R": 1, "G": 2, "B": 3}) is None
    assert charkeys({1: 1}) is None
    assert charkeys([("r", 1)]) is None


def test_charkeys_rejects_repeated_component():
    assert charkeys({"b": 1, "blue": 2}) is None
    assert charkeys({"a": 1, "alpha": 1, "r": 1, "g": 2, "b": 3}) is None


def test_mode_matchers():
    assert is_rgb({"red": 1, "green": 2, "blue": 3})
    assert is_rgb({"r": 1, "g": 2, "b": 3, "a": 0.5})
    assert is_hsl({"hue": 1, "s": 2, "lightness": 3})
    assert is_hsv({"h": 1, "s": 2, "v": 3, "alpha": 1})

    assert not is_rgb({})
    assert not is_rgb([1, 2, 3])
    assert not is_rgb({"r": 1, "g": 2})
    assert not is_rgb({"r": 1, "g": 2, "b": 3, "x": 4})
    assert not is_hsl({"h": 1, "s": 2, "v": 3})
    assert not is_rgb({"red": 10, "green": 20, "blue": 30, "brightness": 200})
    assert not is_rgb({"rouge": 10, "gris": 20, "bleu": 30})
    assert not is_hsl({"hat": 10, "sock": 0.5, "lamp": 0.5})
    assert not is_rgb({"r": 1, "g": 2, "b": 3, "blue": 4})


def test_detect_mode():
    assert detect_mode({"r": 1, "g": 2, "b": 3}) == ColorMode.RGB
    assert detect_mode({"h": 1, "s": 2, "l": 3}) == ColorMode.HSL
    assert detect_mode({"h": 1, "s": 2, "v": 3}) == ColorMode.HSV
    assert detect_mode({"c": 1}) is None


def test_to_mode():
    assert to_mode("RGB") is ColorMode.RGB
    assert to_mode(ColorMode.HSV) is ColorMode.HSV
    with pytest.raises(ValueError):
        to_mode("cmyk")


def test_is_hue_space():
    assert is_hue_space(ColorMode.HSL)
    assert is_hue_space(ColorMode.HSV)
    assert not is_hue_space(ColorMode.RGB)


def test_component_names():
    assert component_names(ColorMode.HSV) == ["hue", "saturation", "value", "alpha"]
    assert component_names(ColorMode.RGB, abbreviated=True) == ["r", "g", "b", "a"]


def test_css_format():
    assert CssFormat("hsla").has_alpha
    assert not CssFormat.RGB.has_alpha
    assert CssFormat.HEX.has_alpha
    assert CssFormat.RGBA.function_mode == "rgb"


def test_named_colors():
    assert len(NAMED_COLORS) > 1000
    assert rgb_for_name("BerkeleyBlue") == (0, 50, 98)
    for name, rgb in NAMED_COLORS.items():
        assert len(rgb) == 3, name
        assert all(0 <= c <= 255 for c in rgb), name
