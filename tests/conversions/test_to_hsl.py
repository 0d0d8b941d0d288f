import pytest

from tincture.conversions.to_hsl import hsv_to_hsl, rgb_to_hsl
from tincture.errors import InvalidComponentCount
from ..samples import samples_hsv_hsl, samples_rgb_hsl


def test_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl(rgb)

        assert abs(h_out - h_exp) < 1e-3
        assert abs(s_out - s_exp) < 1e-6
        assert abs(l_out - l_exp) < 1e-6


def test_hsv_to_hsl():
    for hsv, (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(hsv)

        assert h_out == h_exp
        assert abs(s_out - s_exp) < 1e-6
        assert abs(l_out - l_exp) < 1e-6


def test_rebeccapurple():
    hsl = rgb_to_hsl([102, 51, 153])
    assert hsl == pytest.approx([270, 0.49999999999999994, 0.4], abs=1e-12)


def test_hue_wraps_below_360():
    h, _, _ = rgb_to_hsl([255, 0, 1])
    assert 0 <= h < 360
    assert h == pytest.approx(359.7647, abs=1e-3)


def test_alpha_passes_through():
    assert rgb_to_hsl([255, 128, 0, 0.75])[3] == 0.75
    assert hsv_to_hsl([83, 0.56, 0.4, 0])[3] == 0


def test_undefined_saturation_is_zero():
    assert hsv_to_hsl([83, 0.56, 0]) == [83, 0, 0]
    assert rgb_to_hsl([255, 255, 255]) == [0, 0, 1]


def test_rejects_wrong_component_count():
    with pytest.raises(InvalidComponentCount):
        rgb_to_hsl([1, 2])
    with pytest.raises(InvalidComponentCount):
        hsv_to_hsl([1, 2, 3, 4, 5])
