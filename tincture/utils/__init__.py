from .dimension import get_dimension, check_components
from .defaults import value_or_default, alpha_or_default
from .num_utils import clamp_to, round_half_up, round_to, format_number
from .matchers import (
    match_hex_string,
    match_css_string,
    charkeys,
    is_rgb,
    is_hsl,
    is_hsv,
    detect_mode,
)

__all__ = [
    "get_dimension",
    "check_components",
    "value_or_default",
    "alpha_or_default",
    "clamp_to",
    "round_half_up",
    "round_to",
    "format_number",
    "match_hex_string",
    "match_css_string",
    "charkeys",
    "is_rgb",
    "is_hsl",
    "is_hsv",
    "detect_mode",
]
