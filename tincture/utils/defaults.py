import math
import numbers
from typing import Optional, TypeVar

from ..types.color_types import DEFAULT_ALPHA

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def alpha_or_default(alpha: Optional[float]) -> float:
    """Missing or NaN alpha means fully opaque."""
    if alpha is None:
        return DEFAULT_ALPHA
    if isinstance(alpha, numbers.Real) and math.isnan(alpha):
        return DEFAULT_ALPHA
    return alpha
