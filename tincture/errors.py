"""
Exceptions raised by tincture.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that; the subclasses say which grammar or shape was violated.
"""


class ColorError(ValueError):
    """Base class for every tincture error."""


class InvalidComponentCount(ColorError):
    """A component sequence did not hold 3 or 4 numbers."""


class MissingModeOrComponents(ColorError):
    """A Color was constructed without a mode or without components."""


class InvalidMode(ColorError):
    """A mode outside rgb/hsl/hsv was requested."""


class InvalidHexString(ColorError):
    """A string is not #rgb, #rrggbb or #rrggbbaa."""


class InvalidCssString(ColorError):
    """A string is not a readable rgb(), rgba(), hsl() or hsla() function."""


class InvalidStringFormat(ColorError):
    """A string matched none of hex, CSS or a known color name."""


class UnknownColorName(ColorError, LookupError):
    """A name is not in the named color table."""


class InvalidColorFormat(ColorError, TypeError):
    """Input to create()/set() matched none of RGB, HSL or HSV."""


class UnsupportedFormat(ColorError):
    """A component mapping cannot be written as a CSS function (e.g. HSV)."""


class UnsupportedCssFormat(ColorError):
    """A CSS output format outside hex, hsl, hsla, rgb and rgba was requested."""


class InvalidComponentName(ColorError):
    """A component name is neither a full name nor its first letter."""
