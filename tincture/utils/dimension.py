from typing import Any
from collections.abc import Sized

from ..errors import InvalidComponentCount


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def check_components(components: Any) -> None:
    """Raise InvalidComponentCount unless ``components`` holds 3 or 4 values."""
    if isinstance(components, (str, bytes)):
        raise InvalidComponentCount(f"Components must be a sequence of numbers, got {components!r}")
    dimension = get_dimension(components)
    if dimension not in (3, 4):
        raise InvalidComponentCount(
            f"Components must have 3 or 4 elements, got {dimension}"
        )
