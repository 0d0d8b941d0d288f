"""
Tincture - Color Values and Conversions
=======================================

A small library for one color at a time: RGB, HSL and HSV representations,
lazy conversion between them, hex and CSS text forms, and a table of named
colors.

Quick Start
-----------
>>> from tincture import Color
>>>
>>> color = Color.create("rgba(128, 127, 126, 0.5)")
>>> color.components
[128.0, 127.0, 126.0, 0.5]
>>> color.hue = 200          # switches to HSL
>>> color.mode
<ColorMode.HSL: 'hsl'>
>>>
>>> Color.from_name("BerkeleyBlue").css(format="hex")
'#003262ff'

Modules
-------
- colors: the Color entity
- conversions: pure converters between spaces and text encodings
- samples: the named color table
- errors: exception types
"""

from .colors import Color
from .conversions import (
    rgb_to_hsl,
    rgb_to_hsv,
    hsl_to_rgb,
    hsv_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    hex_to_rgb,
    rgb_to_hex,
    css_to_color,
    color_to_css,
    convert,
)
from .errors import (
    ColorError,
    InvalidComponentCount,
    MissingModeOrComponents,
    InvalidMode,
    InvalidHexString,
    InvalidCssString,
    InvalidStringFormat,
    UnknownColorName,
    InvalidColorFormat,
    UnsupportedFormat,
    UnsupportedCssFormat,
    InvalidComponentName,
)
from .types import ColorMode, CssFormat

__version__ = "1.0.0"

__all__ = [
    # Color entity
    "Color",

    # Conversions
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "hex_to_rgb",
    "rgb_to_hex",
    "css_to_color",
    "color_to_css",
    "convert",

    # Types
    "ColorMode",
    "CssFormat",

    # Errors
    "ColorError",
    "InvalidComponentCount",
    "MissingModeOrComponents",
    "InvalidMode",
    "InvalidHexString",
    "InvalidCssString",
    "InvalidStringFormat",
    "UnknownColorName",
    "InvalidColorFormat",
    "UnsupportedFormat",
    "UnsupportedCssFormat",
    "InvalidComponentName",

    # Version
    "__version__",
]
