"""Lookup over the read-only named color table."""
import logging
from typing import List, Tuple

from ..errors import UnknownColorName
from .named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)


def color_names() -> List[str]:
    return list(NAMED_COLORS)


def name_exists(name: str) -> bool:
    return isinstance(name, str) and name in NAMED_COLORS


def rgb_for_name(name: str) -> Tuple[int, int, int]:
    """RGB triple for ``name`` (exact, case-sensitive match)."""
    if not name_exists(name):
        raise UnknownColorName(f"No color named {name!r}")
    rgb = NAMED_COLORS[name]
    logger.debug("Resolved color name %r to %s", name, rgb)
    return rgb


__all__ = ["NAMED_COLORS", "color_names", "name_exists", "rgb_for_name"]
