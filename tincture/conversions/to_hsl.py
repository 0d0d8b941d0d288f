from typing import List

from ..types.color_types import ColorMode, ComponentInput
from ..utils.dimension import check_components
from .from_rgb import rgb_to_hsl_or_hsv


def rgb_to_hsl(components: ComponentInput) -> List[float]:
    return rgb_to_hsl_or_hsv(components, ColorMode.HSL)


def hsv_to_hsl(components: ComponentInput) -> List[float]:
    """
    Convert HSV to HSL.

    A lightness of exactly 0 or 1 has no defined saturation and yields 0.
    """
    check_components(components)

    hue, saturation_v, value = list(components)[:3]

    lightness = value * (1 - (saturation_v / 2))

    if lightness == 0 or lightness == 1:
        saturation_l = 0
    else:
        min_lightness = min(lightness, 1 - lightness)
        saturation_l = (value - lightness) / min_lightness

    converted = [hue, saturation_l, lightness]
    if len(components) == 4:
        converted.append(components[3])
    return converted
