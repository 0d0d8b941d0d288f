import pytest

from tincture import Color
from tincture.errors import (
    ColorError,
    InvalidColorFormat,
    InvalidComponentCount,
    InvalidMode,
    InvalidStringFormat,
    MissingModeOrComponents,
    UnknownColorName,
)
from tincture.types import ColorMode
from tincture.utils import charkeys


def test_constructor():
    color = Color("rgb", [10, 1, 1])
    assert color.mode == ColorMode.RGB
    assert color.components == [10, 1, 1, 1.0]


def test_constructor_accepts_enum_and_any_case():
    assert Color(ColorMode.HSV, [10, 0.5, 0.5]).mode == "hsv"
    assert Color("HSL", [10, 0.5, 0.5]).mode == ColorMode.HSL


def test_constructor_rejects_missing_mode_or_components():
    with pytest.raises(MissingModeOrComponents):
        Color("rgb", None)
    with pytest.raises(MissingModeOrComponents):
        Color(None, [10, 1, 1])
    with pytest.raises(MissingModeOrComponents):
        Color("rgb", [])
    with pytest.raises(TypeError):
        Color([1, 2, 3])


def test_constructor_rejects_bad_mode_and_count():
    with pytest.raises(InvalidMode):
        Color("barf", [10, 1, 1])
    with pytest.raises(InvalidComponentCount):
        Color("rgb", [0])


def test_constructor_clamps():
    color = Color("hsl", [400, 1.5, -0.2, 7])
    assert color.components == [360, 1, 0, 1]


def test_components_is_a_copy():
    color = Color("rgb", [10, 20, 30])
    color.components[0] = 99
    assert color.red == 10


def test_create_from_sequence():
    rgb = [213, 20, 31]
    color = Color.create(rgb)
    assert color.mode == ColorMode.RGB
    assert color.components == [*rgb, 1.0]
    assert Color.create((213, 20, 31)).components == [*rgb, 1.0]


def test_create_from_hex_keeps_zero_alpha():
    color = Color.create("#23f84900")
    assert color.mode == ColorMode.RGB
    assert color.components == [35, 248, 73, 0]


def test_create_from_css():
    color = Color.create("rgba(128, 127, 126, 0.5)")
    assert color.mode == ColorMode.RGB
    assert color.components == [128, 127, 126, 0.5]

    color = Color.create("hsl(300, 100%, 50%)")
    assert color.mode == ColorMode.HSL
    assert color.components == [300, 1.0, 0.5, 1.0]


def test_create_from_mappings():
    samples = {
        ColorMode.RGB: ({"red": 200, "green": 200, "blue": 150, "alpha": 0.5}, [200, 200, 150, 0.5]),
        ColorMode.HSL: ({"hue": 340, "saturation": 0.5, "lightness": 0.25}, [340, 0.5, 0.25, 1.0]),
        ColorMode.HSV: ({"hue": 190, "saturation": 0.2, "value": 0.8}, [190, 0.2, 0.8, 1.0]),
    }
    for mode, (obj, expected) in samples.items():
        for arg in (obj, charkeys(obj)):
            color = Color.create(arg)
            assert color.mode == mode
            assert color.components == expected


@pytest.mark.parametrize("arg", [1234, None, {}, {"barf": 100}, {"r": 1, "g": 2}])
def test_create_rejects(arg):
    with pytest.raises(InvalidColorFormat):
        Color.create(arg)


@pytest.mark.parametrize("factory, mode", [
    (Color.from_rgb, ColorMode.RGB),
    (Color.from_hsl, ColorMode.HSL),
    (Color.from_hsv, ColorMode.HSV),
])
def test_space_factories(factory, mode):
    color = factory([240, 1, 1])
    assert color.mode == mode
    assert color.components == [240, 1, 1, 1.0]

    for bad in ([1, 2, 3, 4, 5], "farts", {}):
        with pytest.raises(ColorError):
            factory(bad)


@pytest.mark.parametrize("obj", [
    {"red": 10, "green": 20, "blue": 30, "brightness": 200},
    {"rouge": 10, "gris": 20, "bleu": 30},
    {"hat": 10, "sock": 0.5, "lamp": 0.5},
    {"r": 10, "g": 20, "b": 30, "blue": 40},
])
def test_create_rejects_unknown_or_repeated_keys(obj):
    with pytest.raises(InvalidColorFormat):
        Color.create(obj)
    with pytest.raises(InvalidColorFormat):
        Color.from_rgb(obj)
    with pytest.raises(InvalidColorFormat):
        Color.from_hsl(obj)


def test_set_rejects_unknown_or_repeated_keys():
    color = Color.from_rgb([1, 2, 3])
    for obj in ({"hat": 10, "sock": 0.5, "lamp": 0.5}, {"red": 1, "green": 2, "blue": 3, "brightness": 4}):
        with pytest.raises(InvalidColorFormat):
            color.set(obj)
    assert color.components == [1, 2, 3, 1]


def test_space_factory_rejects_other_space_mapping():
    with pytest.raises(InvalidColorFormat):
        Color.from_hsl({"hue": 10, "saturation": 1, "value": 1})


def test_from_string():
    assert Color.from_string("#663399").components == [102, 51, 153, 1.0]
    assert Color.from_string("rgb(1,2,3)").components == [1, 2, 3, 1.0]
    assert Color.from_string("BerkeleyBlue").components == [0, 50, 98, 1.0]
    with pytest.raises(InvalidStringFormat):
        Color.from_string("fart")


def test_from_name():
    color = Color.from_name("BerkeleyBlue")
    assert color.mode == ColorMode.RGB
    assert color.components == [0, 50, 98, 1.0]
    assert color.name == "BerkeleyBlue"


def test_from_name_rejects_unknown():
    with pytest.raises(UnknownColorName, match="No color named"):
        Color.from_name("BlueBarf")
    # names are case-sensitive
    with pytest.raises(UnknownColorName):
        Color.from_name("berkeleyblue")


def test_names():
    names = Color.names()
    assert len(names) > 1000
    assert "BerkeleyBlue" in names
    assert Color.name_exists("BerkeleyBlue")
    assert not Color.name_exists("BarfBlue")


def test_random_is_valid_rgb():
    for _ in range(50):
        color = Color.random()
        assert color.mode == ColorMode.RGB
        assert all(0 <= c <= 255 and float(c).is_integer() for c in color.rgb)
        assert color.alpha == 1.0


def test_random_with_seeded_generator(rng):
    import numpy as np

    first = Color.random(rng)
    second = Color.random(np.random.default_rng(20240611))
    assert first.components == second.components
