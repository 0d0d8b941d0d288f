from typing import List

from ..types.color_types import ColorMode, ComponentInput
from ..utils.dimension import check_components
from .from_rgb import rgb_to_hsl_or_hsv


def rgb_to_hsv(components: ComponentInput) -> List[float]:
    return rgb_to_hsl_or_hsv(components, ColorMode.HSV)


def hsl_to_hsv(components: ComponentInput) -> List[float]:
    """
    Convert HSL to HSV.

    A value of 0 (black) has no defined saturation and yields 0.
    """
    check_components(components)

    hue, saturation_l, lightness = list(components)[:3]

    min_lightness = min(lightness, 1 - lightness)
    value = lightness + (saturation_l * min_lightness)

    if value == 0:
        saturation_v = 0
    else:
        saturation_v = 2 * (1 - (lightness / value))

    converted = [hue, saturation_v, value]
    if len(components) == 4:
        converted.append(components[3])
    return converted
