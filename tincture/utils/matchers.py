"""
String and mapping recognizers.

``match_hex_string`` and ``match_css_string`` decide which grammar a string
belongs to. ``is_rgb``/``is_hsl``/``is_hsv`` decide which color space a
component mapping describes: keys may be full names (``"red"``) or first
letters (``"r"``), an optional alpha key is allowed, nothing else is, and
no component may be named twice.
"""
import re
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from ..types.color_types import COMPONENT_ALIASES, ColorMode

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
CSS_PATTERN = re.compile(r"^(rgb|hsl)(a?)\(", re.IGNORECASE)

ALPHA_KEY = "a"

# Accepted mapping keys: each full component name and its first letter.
KEY_LETTERS: Dict[str, str] = {
    **{letter: letter for letter in COMPONENT_ALIASES},
    **{name: letter for letter, name in COMPONENT_ALIASES.items()},
}


def match_hex_string(value: Any) -> Optional[re.Match]:
    if not isinstance(value, str):
        return None
    return HEX_PATTERN.fullmatch(value)


def match_css_string(value: Any) -> Optional[re.Match]:
    if not isinstance(value, str):
        return None
    return CSS_PATTERN.match(value)


def charkeys(obj: Any) -> Optional[Dict[str, Any]]:
    """
    Re-key a component mapping by single letters.

    Returns:
        ``{"r": ..., "g": ...}``, or None when ``obj`` is not a mapping, has
        a key outside the component names, or names one component twice
        (e.g. ``"b"`` and ``"blue"``)
    """
    if not isinstance(obj, Mapping):
        return None
    keyed: Dict[str, Any] = {}
    for key, value in obj.items():
        letter = KEY_LETTERS.get(key) if isinstance(key, str) else None
        if letter is None or letter in keyed:
            return None
        keyed[letter] = value
    return keyed


def has_all_charkeys(required: Iterable[str]) -> Callable[[Any], bool]:
    required_keys = frozenset(required)

    def matcher(obj: Any) -> bool:
        keyed = charkeys(obj)
        if not keyed:
            return False
        keys = set(keyed)
        keys.discard(ALPHA_KEY)
        return keys == required_keys

    return matcher


is_rgb = has_all_charkeys("rgb")
is_hsl = has_all_charkeys("hsl")
is_hsv = has_all_charkeys("hsv")

MODE_MATCHERS = (
    (ColorMode.RGB, is_rgb),
    (ColorMode.HSL, is_hsl),
    (ColorMode.HSV, is_hsv),
)


def detect_mode(obj: Any) -> Optional[ColorMode]:
    """Mode whose key set ``obj`` matches, checked RGB, HSL, then HSV."""
    for mode, matcher in MODE_MATCHERS:
        if matcher(obj):
            return mode
    return None
