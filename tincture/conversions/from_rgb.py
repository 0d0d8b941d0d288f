from typing import List

from ..types.color_types import ColorMode, ComponentInput
from ..utils.dimension import check_components


def rgb_to_hsl_or_hsv(components: ComponentInput, mode: ColorMode) -> List[float]:
    """
    Convert RGB channels to HSL or HSV.

    Based on https://en.wikipedia.org/wiki/HSL_and_HSV#From_RGB

    Args:
        components: (r, g, b[, a]) with channels in [0, 255]
        mode: ColorMode.HSL or ColorMode.HSV

    Returns:
        [hue [0,360), saturation [0,1], lightness or value [0,1][, a]]
    """
    check_components(components)

    red, green, blue = (c / 255.0 for c in list(components)[:3])

    max_c = max(red, green, blue)
    min_c = min(red, green, blue)

    value = max_c
    chroma = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    if chroma == 0:
        hue = 0.0
    elif max_c == red:
        hue = ((green - blue) / chroma) % 6
    elif max_c == green:
        hue = ((blue - red) / chroma) + 2
    else:
        hue = ((red - green) / chroma) + 4
    hue *= 60.0
    if hue < 0:
        hue += 360.0

    if mode == ColorMode.HSL:
        if lightness == 0 or lightness == 1:
            saturation = 0.0
        else:
            saturation = chroma / (1 - abs((2 * lightness) - 1))
        converted = [hue, saturation, lightness]
    else:
        saturation = 0.0 if value == 0 else chroma / value
        converted = [hue, saturation, value]

    if len(components) == 4:
        converted.append(components[3])
    return converted
