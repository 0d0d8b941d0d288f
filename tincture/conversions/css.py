"""
CSS functional notation.

``css_to_color`` reads ``rgb()``, ``rgba()``, ``hsl()`` and ``hsla()`` into a
component mapping keyed by full names; ``color_to_css`` writes such a mapping
(full or single-letter keys) back out. Saturation and lightness are percents
in CSS and fractions everywhere else.
"""
import logging
import math
import re
from typing import Any, Dict, List, Mapping

from ..errors import InvalidCssString, UnsupportedFormat
from ..types.color_types import ColorMode, component_names
from ..types.format_type import CSS_DECIMALS, CSS_PERCENT_SCALE
from ..utils.matchers import ALPHA_KEY, charkeys, is_hsl, is_rgb, match_css_string
from ..utils.num_utils import format_number, round_to

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^\d,.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

_PERCENT_FIELDS = {"saturation", "lightness"}


def _parse_field(fields: List[str], index: int) -> float:
    """Leading decimal literal of ``fields[index]``; NaN when there is none."""
    if index >= len(fields):
        return math.nan
    match = _LEADING_NUMBER.match(fields[index])
    if not match:
        return math.nan
    return float(match.group(0))


def css_to_color(value: str) -> Dict[str, float]:
    """
    Parse a CSS color function.

    Args:
        value: e.g. ``"rgba(128, 127, 126, 0.5)"`` or ``"hsl(300, 100%, 50%)"``

    Returns:
        ``{"red", "green", "blue"[, "alpha"]}`` or
        ``{"hue", "saturation", "lightness"[, "alpha"]}``

    Raises:
        InvalidCssString: not a CSS color function, or a color field is unreadable
    """
    match = match_css_string(value)
    if not match:
        raise InvalidCssString(f"Invalid css string: {value!r}")

    mode = ColorMode(match.group(1).lower())
    has_alpha = bool(match.group(2))
    fields = _NON_NUMERIC.sub("", value).split(",")

    color: Dict[str, float] = {}
    for index, name in enumerate(component_names(mode)[:3]):
        field = _parse_field(fields, index)
        if math.isnan(field):
            raise InvalidCssString(f"Missing or unreadable {name} in css string: {value!r}")
        if name in _PERCENT_FIELDS:
            field /= CSS_PERCENT_SCALE
        color[name] = field

    if has_alpha:
        color["alpha"] = _parse_field(fields, 3)

    logger.debug("Parsed css %r as %s", value, color)
    return color


def color_to_css(obj: Mapping[str, Any]) -> str:
    """
    Write an RGB or HSL component mapping as a CSS function.

    Values are rounded to 2 decimals; the function gains a trailing ``a``
    when the mapping carries a non-None alpha.

    Raises:
        UnsupportedFormat: the keys describe neither RGB nor HSL
    """
    keyed = charkeys(obj)

    if is_rgb(keyed):
        mode = ColorMode.RGB
    elif is_hsl(keyed):
        mode = ColorMode.HSL
    else:
        raise UnsupportedFormat(f"Unsupported css format: {obj!r}")

    components = [keyed.get(name) for name in component_names(mode, abbreviated=True)]

    if mode == ColorMode.HSL:
        components[1] *= CSS_PERCENT_SCALE
        components[2] *= CSS_PERCENT_SCALE

    function = mode.value
    if keyed.get(ALPHA_KEY) is not None:
        function += "a"
    else:
        components = components[:3]

    body = ",".join(format_number(round_to(component, CSS_DECIMALS)) for component in components)
    return f"{function}({body})"
