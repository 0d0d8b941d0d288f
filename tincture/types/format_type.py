# No dependencies
from enum import Enum


class CssFormat(str, Enum):
    HEX = "hex"
    HSL = "hsl"
    HSLA = "hsla"
    RGB = "rgb"
    RGBA = "rgba"

    @property
    def has_alpha(self) -> bool:
        return self in (CssFormat.HEX, CssFormat.HSLA, CssFormat.RGBA)

    @property
    def function_mode(self) -> str:
        """Mode read by the CSS function form ("rgb" or "hsl")."""
        return self.value[:3]


CSS_PERCENT_SCALE = 100
CSS_DECIMALS = 2
