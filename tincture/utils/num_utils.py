import math

from boundednumbers.functions import clamp


def clamp_to(value: float, maximum: float, minimum: float = 0) -> float:
    """Clamp ``value`` into ``[minimum, maximum]`` and return a plain float."""
    return float(clamp(value, minimum, maximum))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, like JavaScript Math.round."""
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int) -> float:
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Render a number the way it reads in CSS: ``100`` not ``100.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
