from typing import List

from ..errors import InvalidHexString
from ..types.color_types import ComponentInput
from ..utils.dimension import check_components
from ..utils.matchers import match_hex_string
from ..utils.num_utils import round_half_up


def hex_to_rgb(value: str) -> List[float]:
    """
    Decode ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional, any case).

    Returns:
        [r, g, b] as integers in [0, 255], plus alpha in [0, 1] for 8 digits
    """
    match = match_hex_string(value)
    if not match:
        raise InvalidHexString(f"Invalid hex string: {value!r}")

    digits = match.group(1).lower()

    if len(digits) == 3:
        return [int(digit, 16) * 0x11 for digit in digits]

    components: List[float] = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(components) == 4:
        components[3] /= 255
    return components


def rgb_to_hex(components: ComponentInput) -> str:
    """Encode [r, g, b[, a]] as lowercase ``#rrggbb[aa]``; alpha is scaled by 255."""
    check_components(components)

    values = list(components)[:3]
    if len(components) == 4:
        values.append(components[3] * 255)

    return "#" + "".join(f"{round_half_up(value):02x}" for value in values)
