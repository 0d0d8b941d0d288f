import pytest

from tincture import Color
from tincture.errors import UnsupportedCssFormat
from tincture.types import CssFormat


@pytest.fixture
def berkeley():
    return Color.from_name("BerkeleyBlue")


def test_css_formats(berkeley):
    expects = {
        "hex": "#003262ff",
        "hsl": "hsl(209.39,100,19.22)",
        "hsla": "hsla(209.39,100,19.22,1)",
        "rgb": "rgb(0,50,98)",
        "rgba": "rgba(0,50,98,1)",
    }
    for fmt, expect in expects.items():
        assert berkeley.css(fmt) == expect, fmt


def test_css_accepts_enum(berkeley):
    assert berkeley.css(CssFormat.HSL) == "hsl(209.39,100,19.22)"
    assert Color.css_formats == ("hex", "hsl", "hsla", "rgb", "rgba")


def test_css_defaults_to_rgba(berkeley):
    assert berkeley.css() == "rgba(0,50,98,1)"


def test_css_alpha_override(berkeley):
    assert berkeley.css(format="hex", alpha=0.5) == "#00326280"
    assert berkeley.css(alpha=0.5) == "rgba(0,50,98,0.5)"
    assert berkeley.alpha == 1.0


def test_css_uses_own_alpha():
    color = Color.from_rgb([0, 50, 98, 0.5])
    assert color.css() == "rgba(0,50,98,0.5)"
    assert color.css("rgb") == "rgb(0,50,98)"
    assert color.css("hex") == "#00326280"


def test_css_rejects_unsupported(berkeley):
    with pytest.raises(UnsupportedCssFormat, match="Unsupported"):
        berkeley.css("cmyk")


def test_css_reparses():
    color = Color.from_hsl([120, 0.5, 0.25, 0.5])
    assert Color.create(color.css("hsla")).equals(color)


def test_str(berkeley):
    assert f"Wow! {berkeley}" == "Wow! #003262ff"


def test_repr():
    assert repr(Color.from_rgb([1, 2, 3])) == "Color(mode='rgb', components=[1.0, 2.0, 3.0, 1.0])"
