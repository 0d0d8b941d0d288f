import math
from typing import List

from ..types.color_types import ComponentInput
from ..utils.dimension import check_components

## HSL to RGB conversions

def hsl_to_rgb(components: ComponentInput) -> List[float]:
    """
    Convert HSL to RGB channels in [0, 255].

    Based on https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        components: (h, s, l[, a]), hue in degrees, s and l in [0, 1]

    Returns:
        [r, g, b[, a]], channels unrounded
    """
    check_components(components)

    hue, saturation, lightness = list(components)[:3]

    # hue 0 lands on sextant -1 below; 360 is the same angle and indexes cleanly
    if hue == 0:
        hue = 360

    chroma = (1 - abs((2 * lightness) - 1)) * saturation
    offset = lightness - (chroma / 2)
    sector = hue / 60.0
    x = chroma * (1 - abs((sector % 2) - 1))

    sextant = math.ceil(sector) - 1
    patterns = [
        (chroma, x, 0),
        (x, chroma, 0),
        (0, chroma, x),
        (0, x, chroma),
        (x, 0, chroma),
        (chroma, 0, x),
    ]
    if 0 <= sextant < len(patterns):
        pattern = patterns[sextant]
    else:
        pattern = (0, 0, 0)

    converted = [(c + offset) * 255 for c in pattern]
    if len(components) == 4:
        converted.append(components[3])
    return converted

## HSV to RGB conversions

def hsv_to_rgb(components: ComponentInput) -> List[float]:
    """
    Convert HSV to RGB channels in [0, 255].

    Args:
        components: (h, s, v[, a]), hue in degrees, s and v in [0, 1]

    Returns:
        [r, g, b[, a]], channels unrounded
    """
    check_components(components)

    hue, saturation, value = list(components)[:3]

    hue_sector = hue / 60.0
    sextant = math.floor(hue_sector)
    offset = hue_sector - sextant

    p = value * (1 - saturation) * 255
    q = value * (1 - (saturation * offset)) * 255
    t = value * (1 - (saturation * (1 - offset))) * 255
    v = value * 255

    converted = [
        [v, t, p],
        [q, v, p],
        [p, v, t],
        [p, q, v],
        [t, p, v],
        [v, p, q],
    ][sextant % 6]

    if len(components) == 4:
        converted.append(components[3])
    return converted
