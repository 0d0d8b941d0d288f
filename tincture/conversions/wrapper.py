from typing import Callable, Dict, List, Tuple, Union

from ..types.color_types import ColorMode, ComponentInput, to_mode as coerce_mode
from ..utils.dimension import check_components
from .to_rgb import hsl_to_rgb, hsv_to_rgb
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv

Converter = Callable[[ComponentInput], List[float]]

# Every directed edge between the three spaces; nothing is routed through a third space.
CONVERT: Dict[Tuple[ColorMode, ColorMode], Converter] = {
    (ColorMode.RGB, ColorMode.HSL): rgb_to_hsl,
    (ColorMode.RGB, ColorMode.HSV): rgb_to_hsv,
    (ColorMode.HSL, ColorMode.RGB): hsl_to_rgb,
    (ColorMode.HSV, ColorMode.RGB): hsv_to_rgb,
    (ColorMode.HSL, ColorMode.HSV): hsl_to_hsv,
    (ColorMode.HSV, ColorMode.HSL): hsv_to_hsl,
}


def convert(
    components: ComponentInput,
    from_mode: Union[ColorMode, str],
    to_mode: Union[ColorMode, str],
) -> List[float]:
    """
    Convert a component sequence between two modes.

    Args:
        components: 3 or 4 numbers in ``from_mode``
        from_mode: Source mode ("rgb", "hsl", "hsv")
        to_mode: Target mode

    Returns:
        New list in ``to_mode``; a copy when the modes are equal
    """
    source = coerce_mode(from_mode)
    target = coerce_mode(to_mode)
    if source == target:
        check_components(components)
        return list(components)
    return CONVERT[(source, target)](components)
