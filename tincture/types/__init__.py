from .color_types import (
    ColorMode,
    Components,
    ComponentInput,
    HUE_SPACES,
    component_names,
    is_hue_space,
    to_mode,
)
from .format_type import CssFormat

__all__ = [
    "ColorMode",
    "Components",
    "ComponentInput",
    "HUE_SPACES",
    "component_names",
    "is_hue_space",
    "to_mode",
    "CssFormat",
]
