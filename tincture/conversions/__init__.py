"""
Tincture Color Conversions
==========================

Pure functions converting component sequences between RGB, HSL and HSV,
and between RGB and its text encodings.

Every numeric converter takes 3 or 4 numbers and returns a new list. A 4th
(alpha) value is carried through untouched; anything other than 3 or 4
values raises ``InvalidComponentCount``.

Ranges
------
    RGB: red/green/blue in [0, 255]
    HSL: hue in [0, 360], saturation/lightness in [0, 1]
    HSV: hue in [0, 360], saturation/value in [0, 1]
    alpha: [0, 1] everywhere

Numeric converters
------------------
    rgb_to_hsl, rgb_to_hsv      (shared core: rgb_to_hsl_or_hsv)
    hsl_to_rgb, hsv_to_rgb
    hsl_to_hsv, hsv_to_hsl
    convert(components, from_mode, to_mode)

Text codecs
-----------
    hex_to_rgb("#663399ff")  -> [102, 51, 153, 1.0]
    rgb_to_hex([0, 50, 98])  -> "#003262"
    css_to_color("hsl(300, 100%, 50%)") -> {"hue": 300.0, "saturation": 1.0, "lightness": 0.5}
    color_to_css({"r": 0, "g": 50, "b": 98, "a": 1}) -> "rgba(0,50,98,1)"

Examples
--------
>>> from tincture.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl([102, 51, 153])
[270.0, 0.49999999999999994, 0.4]
>>> [round(c) for c in hsl_to_rgb([270, 0.5, 0.4])]
[102, 51, 153]
"""

from .from_rgb import rgb_to_hsl_or_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .to_rgb import hsl_to_rgb, hsv_to_rgb
from .hex import hex_to_rgb, rgb_to_hex
from .css import css_to_color, color_to_css
from .wrapper import CONVERT, convert

__all__ = [
    'rgb_to_hsl_or_hsv',
    'rgb_to_hsl',
    'rgb_to_hsv',
    'hsl_to_rgb',
    'hsv_to_rgb',
    'hsl_to_hsv',
    'hsv_to_hsl',
    'hex_to_rgb',
    'rgb_to_hex',
    'css_to_color',
    'color_to_css',
    'CONVERT',
    'convert',
]
