from __future__ import annotations
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union


class ColorMode(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"


Scalar = Union[int, float]
Components = List[float]
ComponentInput = Sequence[Scalar]
HUE_SPACES = {ColorMode.HSL, ColorMode.HSV}

ALPHA_INDEX = 3
DEFAULT_ALPHA = 1.0

# Positional component names per mode; alpha is always last.
COMPONENT_NAMES: Dict[ColorMode, Tuple[str, str, str, str]] = {
    ColorMode.RGB: ("red", "green", "blue", "alpha"),
    ColorMode.HSL: ("hue", "saturation", "lightness", "alpha"),
    ColorMode.HSV: ("hue", "saturation", "value", "alpha"),
}

# Upper bound of every position; the lower bound is always 0.
MODE_MAXIMA: Dict[ColorMode, Tuple[float, float, float, float]] = {
    ColorMode.RGB: (255, 255, 255, 1),
    ColorMode.HSL: (360, 1, 1, 1),
    ColorMode.HSV: (360, 1, 1, 1),
}

COMPONENT_INDEX: Dict[str, int] = {
    "red": 0,
    "green": 1,
    "blue": 2,
    "hue": 0,
    "saturation": 1,
    "lightness": 2,
    "value": 2,
    "alpha": 3,
}

COMPONENT_MAXIMA: Dict[str, float] = {
    "red": 255,
    "green": 255,
    "blue": 255,
    "hue": 360,
    "saturation": 1,
    "lightness": 1,
    "value": 1,
    "alpha": 1,
}

COMPONENT_ALIASES: Dict[str, str] = {name[0]: name for name in COMPONENT_INDEX}


def to_mode(mode: Union[ColorMode, str]) -> ColorMode:
    """Coerce a mode string (any case) to ColorMode. Raises ValueError."""
    if isinstance(mode, ColorMode):
        return mode
    return ColorMode(str(mode).lower())


def is_hue_space(mode: ColorMode) -> bool:
    return mode in HUE_SPACES


def component_names(mode: ColorMode, abbreviated: bool = False) -> List[str]:
    """
    Names of the four positions of ``mode``.

    Args:
        mode: Color mode
        abbreviated: Return first letters ("r", "g", ...) instead of full names

    Returns:
        List of four names in positional order
    """
    names = COMPONENT_NAMES[mode]
    if abbreviated:
        return [name[0] for name in names]
    return list(names)
