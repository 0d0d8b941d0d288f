"""
Tincture Color Entity
=====================

``Color`` holds one color as four numbers tagged with the mode (rgb, hsl or
hsv) they are expressed in, and converts lazily when a component from a
different space is read or written.

Usage
-----
>>> from tincture.colors import Color
>>>
>>> color = Color.from_hex("#663399FF")
>>> color.mode          # 'rgb'
>>> color.hue           # 270.0, color is now in 'hsl'
>>> color.value         # ~0.6, color is now in 'hsv'
>>> color.saturation    # ~0.667, still 'hsv'
>>> color.blue          # 153.0, back in 'rgb'
>>>
>>> Color.from_name("BerkeleyBlue").css(format="hsl")
'hsl(209.39,100,19.22)'
>>> Color.from_hex("#000000").tint(0.5).hex6
'#808080'

Construction
------------
    Color(mode, components)      validated, clamped
    Color.create(arg)            sequence, string or component mapping
    Color.from_rgb / from_hsl / from_hsv
    Color.from_hex / from_css / from_name / from_string
    Color.random(rng=None)

Notes
-----
- Components are always clamped: RGB channels to [0, 255], hue to [0, 360],
  everything else to [0, 1].
- A missing or NaN alpha becomes 1.0.
- ``name`` is kept across mode switches and clones and cleared by any write.
"""

from .color import Color

__all__ = ['Color']
