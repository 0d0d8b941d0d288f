import copy

import pytest

from tincture import Color
from tincture.types import ColorMode


def test_shade():
    red = Color.from_hex("#ff0000")
    assert red.lightness == 0.5
    assert red.shade(0.1) is red
    assert red.lightness == 0.4
    assert red.red < 255


def test_tint():
    black = Color.from_hex("#000000")
    assert black.lightness == 0
    black.tint(0.5)
    assert black.lightness == 0.5
    assert black.hex6 == "#808080"


def test_shade_and_tint_clamp():
    assert Color.from_hex("#ffffff").tint(0.5).lightness == 1
    assert Color.from_hex("#000000").shade(0.5).lightness == 0


def test_complement():
    red = Color.from_hex("#ff0000")
    red_comp = red.clone().complement()
    cyan = Color.from_hsv([180, 1.0, 1.0])
    cyan_comp = cyan.clone().complement()

    assert red_comp.mode == ColorMode.RGB
    assert cyan_comp.mode == ColorMode.HSV
    assert red.hex == cyan_comp.hex
    assert cyan.hex == red_comp.hex


def test_complement_wraps_hue():
    color = Color.from_hsl([300, 0.5, 0.5]).complement()
    assert color.hue == 120


def test_clone_is_independent():
    color = Color.from_rgb([10, 20, 30, 0.5])
    clone = color.clone()
    clone.red = 200
    assert color.red == 10
    assert clone.components == [200, 20, 30, 0.5]


def test_copy_protocol():
    color = Color.from_hsl([120, 0.5, 0.5])
    for copied in (copy.copy(color), copy.deepcopy(color)):
        assert copied is not color
        assert copied.mode == color.mode
        assert copied.components == color.components


def test_equals():
    berkeley = Color.from_name("BerkeleyBlue")
    assert berkeley.equals("BerkeleyBlue")
    assert berkeley.equals([0, 50, 98])
    assert berkeley.equals("#003262")
    assert not berkeley.equals("#003263")


def test_equals_across_modes_keeps_modes():
    red = Color.from_hex("#ff0000")
    hsl_red = Color.from_hsl([0, 1, 0.5])
    assert red.equals(hsl_red)
    assert hsl_red.equals(red)
    assert red.mode == ColorMode.RGB
    assert hsl_red.mode == ColorMode.HSL


def test_equals_ignores_alpha():
    assert Color.from_rgb([1, 2, 3, 0.2]).equals(Color.from_rgb([1, 2, 3, 0.9]))


def test_eq_operator():
    assert Color.from_hex("#663399") == Color.from_rgb([102, 51, 153])
    assert Color.from_hex("#663399") != Color.from_rgb([102, 51, 154])
    assert Color.from_hex("#663399") != "#663399"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Color.from_hex("#663399"))


def test_name_survives_reads_and_clone():
    color = Color.from_name("BerkeleyBlue")
    color.hue
    color.switch_mode("hsv")
    assert color.name == "BerkeleyBlue"
    assert color.clone().name == "BerkeleyBlue"


def test_name_cleared_by_writes():
    writes = [
        lambda c: setattr(c, "red", 1),
        lambda c: setattr(c, "alpha", 0.5),
        lambda c: setattr(c, "hsl", [10, 0.5, 0.5]),
        lambda c: setattr(c, "hex", "#123456"),
        lambda c: c.set({"r": 1, "g": 2, "b": 3}),
        lambda c: c.shade(0.1),
        lambda c: c.complement(),
    ]
    for write in writes:
        color = Color.from_name("BerkeleyBlue")
        write(color)
        assert color.name is None


def test_names_only_match_when_both_named():
    named = Color.from_name("BerkeleyBlue")
    plain = Color.from_rgb([0, 50, 98])
    assert named.equals(plain)
    assert plain.equals(named)
