from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, List, Optional, Union

import numpy as np

from ..conversions import CONVERT, color_to_css, css_to_color, hex_to_rgb, rgb_to_hex
from ..errors import (
    InvalidColorFormat,
    InvalidComponentName,
    InvalidMode,
    InvalidStringFormat,
    MissingModeOrComponents,
    UnsupportedCssFormat,
)
from ..samples import color_names, name_exists, rgb_for_name
from ..types.color_types import (
    ALPHA_INDEX,
    COMPONENT_ALIASES,
    COMPONENT_INDEX,
    COMPONENT_MAXIMA,
    MODE_MAXIMA,
    ColorMode,
    ComponentInput,
    Components,
    component_names,
    is_hue_space,
    to_mode,
)
from ..types.format_type import CssFormat
from ..utils.defaults import alpha_or_default, value_or_default
from ..utils.dimension import check_components, get_dimension
from ..utils.matchers import ALPHA_KEY, charkeys, detect_mode, match_css_string, match_hex_string
from ..utils.num_utils import clamp_to

logger = logging.getLogger(__name__)

ColorInput = Union["Color", ComponentInput, str, Mapping]

_RGB_COMPONENTS = ("red", "green", "blue")
_HUE_COMPONENTS = ("hue", "saturation")


def _component_property(name: str) -> property:
    def getter(self: Color) -> float:
        return self.get_component(name)

    def setter(self: Color, value: float) -> None:
        self.set_component(name, value)

    return property(getter, setter, doc=f"The {name} component. Reading or writing may switch mode.")


def _components_property(mode: ColorMode, with_alpha: bool) -> property:
    def getter(self: Color) -> Components:
        components = self._get_components(mode)
        return components if with_alpha else components[:3]

    def setter(self: Color, components: ComponentInput) -> None:
        self._set_components(mode, components, with_alpha)

    label = mode.value + ("a" if with_alpha else "")
    return property(getter, setter, doc=f"Components as {label}; switches the color to {mode.value}.")


class Color:
    """
    A mutable color stored in exactly one of RGB, HSL or HSV at a time.

    The stored ``mode`` changes lazily: asking for a component that belongs
    to another space converts the stored components in place first. Hue and
    saturation stay in whichever hue space (HSL or HSV) is current and only
    default to HSL from RGB. Every write clamps into range.

    Reads can mutate, so a Color is not safe to share between threads
    without the caller's own locking.

    >>> color = Color.from_hex("#663399")
    >>> color.hue
    270.0
    >>> color.mode
    <ColorMode.HSL: 'hsl'>
    """

    __slots__ = ("_mode", "_components", "name")

    css_formats: ClassVar[tuple] = tuple(fmt.value for fmt in CssFormat)

    def __init__(self, mode: Union[ColorMode, str], components: ComponentInput) -> None:
        self.name: Optional[str] = None
        self._set_data(mode, components)

    def _set_data(self, mode: Union[ColorMode, str], components: ComponentInput) -> None:
        if not mode or components is None or get_dimension(components) == 0:
            raise MissingModeOrComponents("Must pass mode and components")

        try:
            mode = to_mode(mode)
        except ValueError as exc:
            raise InvalidMode(f"Invalid mode {mode!r}") from exc

        check_components(components)

        values = list(components)
        alpha = values[ALPHA_INDEX] if len(values) == 4 else None
        values = values[:3] + [alpha_or_default(alpha)]

        self._components = [clamp_to(v, m) for v, m in zip(values, MODE_MAXIMA[mode])]
        self._mode = mode
        self.name = None

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def mode(self) -> ColorMode:
        return self._mode

    @property
    def components(self) -> Components:
        """Copy of the stored components in the current mode."""
        return list(self._components)

    # ------------------ FACTORIES ------------------
    @classmethod
    def create(cls, arg: Any = None) -> Color:
        """
        Build a Color from whatever ``arg`` is.

        Args:
            arg: RGB sequence, hex/CSS/name string, or a non-empty mapping
                 with RGB, HSL or HSV keys (full names or first letters)

        Raises:
            InvalidColorFormat: ``arg`` is none of the above
        """
        if isinstance(arg, (list, tuple, np.ndarray)):
            return cls.from_rgb(arg)
        if isinstance(arg, str):
            return cls.from_string(arg)
        if isinstance(arg, Mapping) and arg:
            mode = detect_mode(arg)
            if mode == ColorMode.RGB:
                return cls.from_rgb(arg)
            if mode == ColorMode.HSL:
                return cls.from_hsl(arg)
            if mode == ColorMode.HSV:
                return cls.from_hsv(arg)
        raise InvalidColorFormat(
            "Invalid color format. Must be RGB sequence, color string, or RGB/HSL/HSV mapping"
        )

    @classmethod
    def _from_space(cls, arg: Any, mode: ColorMode) -> Color:
        if isinstance(arg, (list, tuple, np.ndarray)):
            check_components(arg)
            components = list(arg)
        elif isinstance(arg, Mapping) and detect_mode(arg) == mode:
            keys = charkeys(arg)
            components = [keys.get(letter) for letter in component_names(mode, abbreviated=True)]
        else:
            raise InvalidColorFormat(f"Invalid {mode.value.upper()} format: {arg!r}")
        return cls(mode, components)

    @classmethod
    def from_rgb(cls, arg: Union[ComponentInput, Mapping]) -> Color:
        return cls._from_space(arg, ColorMode.RGB)

    @classmethod
    def from_hsl(cls, arg: Union[ComponentInput, Mapping]) -> Color:
        return cls._from_space(arg, ColorMode.HSL)

    @classmethod
    def from_hsv(cls, arg: Union[ComponentInput, Mapping]) -> Color:
        return cls._from_space(arg, ColorMode.HSV)

    @classmethod
    def from_string(cls, value: str) -> Color:
        """Try hex, then CSS, then a color name."""
        if match_hex_string(value):
            return cls.from_hex(value)
        if match_css_string(value):
            return cls.from_css(value)
        if name_exists(value):
            return cls.from_name(value)
        raise InvalidStringFormat(f"Invalid string format: {value!r}")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        return cls.from_rgb(hex_to_rgb(value))

    @classmethod
    def from_css(cls, value: str) -> Color:
        return cls.create(css_to_color(value))

    @classmethod
    def from_name(cls, name: str) -> Color:
        color = cls.from_rgb(rgb_for_name(name))
        color.name = name
        return color

    @staticmethod
    def names() -> List[str]:
        return color_names()

    @staticmethod
    def name_exists(name: str) -> bool:
        return name_exists(name)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Color:
        """Opaque color with red, green and blue drawn uniformly from 0..255."""
        if rng is None:
            rng = np.random.default_rng()
        channels = rng.integers(0, 255, size=3, endpoint=True)
        return cls(ColorMode.RGB, [int(channel) for channel in channels])

    # ------------------ MODE SWITCHING ------------------
    def _switch_mode(self, mode: Union[ColorMode, str]) -> None:
        try:
            target = to_mode(mode)
        except ValueError:
            return
        if target == self._mode:
            return

        converted = CONVERT[(self._mode, target)](self._components)
        logger.debug("Switching color mode %s -> %s", self._mode.value, target.value)
        self._components = [clamp_to(v, m) for v, m in zip(converted, MODE_MAXIMA[target])]
        self._mode = target

    def switch_mode(self, mode: Union[ColorMode, str]) -> Color:
        """Convert the stored components to ``mode`` in place and return self."""
        try:
            target = to_mode(mode)
        except ValueError as exc:
            raise InvalidMode(f"Invalid mode {mode!r}") from exc
        self._switch_mode(target)
        return self

    def _switch_mode_for_component(self, name: str) -> None:
        if name in _RGB_COMPONENTS:
            self._switch_mode(ColorMode.RGB)
        elif name in _HUE_COMPONENTS:
            # Don't switch from HSV to HSL for no reason
            if not is_hue_space(self._mode):
                self._switch_mode(ColorMode.HSL)
        elif name == "lightness":
            self._switch_mode(ColorMode.HSL)
        elif name == "value":
            self._switch_mode(ColorMode.HSV)

    # ------------------ COMPONENT ACCESS ------------------
    @staticmethod
    def _resolve_component_name(name: str) -> str:
        full_name = COMPONENT_ALIASES.get(name, name)
        if full_name not in COMPONENT_INDEX:
            raise InvalidComponentName(f"Unknown component {name!r}")
        return full_name

    def get_component(self, name: str) -> float:
        """Read one component by full or single-letter name; may switch mode."""
        name = self._resolve_component_name(name)
        self._switch_mode_for_component(name)
        return self._components[COMPONENT_INDEX[name]]

    def set_component(self, name: str, value: float) -> None:
        """Write one component, clamped into its range; may switch mode."""
        name = self._resolve_component_name(name)
        self._switch_mode_for_component(name)
        if name == "alpha":
            value = alpha_or_default(value)
        self._components[COMPONENT_INDEX[name]] = clamp_to(value, COMPONENT_MAXIMA[name])
        self.name = None

    def _get_components(self, mode: ColorMode) -> Components:
        self._switch_mode(mode)
        return list(self._components)

    def _set_components(self, mode: ColorMode, components: ComponentInput, with_alpha: bool) -> None:
        check_components(components)
        components = list(components)
        if with_alpha:
            alpha = components[ALPHA_INDEX] if len(components) == 4 else None
        else:
            alpha = self._components[ALPHA_INDEX]
        self._set_data(mode, components[:3] + [alpha])

    red = r = _component_property("red")
    green = g = _component_property("green")
    blue = b = _component_property("blue")
    hue = h = _component_property("hue")
    saturation = s = _component_property("saturation")
    lightness = l = _component_property("lightness")
    value = v = _component_property("value")
    alpha = a = _component_property("alpha")

    rgb = _components_property(ColorMode.RGB, with_alpha=False)
    rgba = _components_property(ColorMode.RGB, with_alpha=True)
    hsl = _components_property(ColorMode.HSL, with_alpha=False)
    hsla = _components_property(ColorMode.HSL, with_alpha=True)
    hsv = _components_property(ColorMode.HSV, with_alpha=False)
    hsva = _components_property(ColorMode.HSV, with_alpha=True)

    @property
    def hex(self) -> str:
        """8-digit ``#rrggbbaa``; switches the color to RGB."""
        self._switch_mode(ColorMode.RGB)
        return rgb_to_hex(self._components)

    @hex.setter
    def hex(self, value: str) -> None:
        self._set_data(ColorMode.RGB, hex_to_rgb(value))

    @property
    def hex6(self) -> str:
        return self.hex[:7]

    # ------------------ MAPPING ACCESS ------------------
    def get(self, mode: Union[ColorMode, str, None] = None, abbreviated: bool = False) -> Dict[str, float]:
        """
        Components of ``mode`` (default: current mode) as a dict.

        Args:
            mode: Mode to read in; the color is switched to it
            abbreviated: Key by first letter ("r") instead of full name ("red")

        Returns:
            Dict with the three color components and alpha
        """
        mode = value_or_default(mode, self._mode)
        try:
            mode = to_mode(mode)
        except ValueError as exc:
            raise InvalidMode(f"Invalid mode {mode!r}") from exc

        self._switch_mode(mode)
        names = component_names(mode, abbreviated=abbreviated)
        return dict(zip(names, self._components))

    def set(self, obj: Mapping[str, float]) -> None:
        """Replace mode and components from an RGB, HSL or HSV mapping."""
        if not isinstance(obj, Mapping):
            raise InvalidColorFormat(f"Invalid color format: {obj!r}")
        keys = charkeys(obj)
        mode = detect_mode(keys)
        if mode is None:
            raise InvalidColorFormat(f"Invalid color format: keys {list(obj)}")

        components = [keys.get(letter) for letter in component_names(mode, abbreviated=True)]
        self._set_data(mode, components)

    # ------------------ DERIVED OPERATIONS ------------------
    def shade(self, factor: float) -> Color:
        """Darken by lowering HSL lightness by ``factor``."""
        self.lightness -= factor
        return self

    def tint(self, factor: float) -> Color:
        """Lighten by raising HSL lightness by ``factor``."""
        self.lightness += factor
        return self

    def complement(self) -> Color:
        if is_hue_space(self._mode):
            self.hue = (self.hue + 180) % 360
        else:
            self.rgb = [255 - c for c in self.rgb]
        return self

    def clone(self) -> Color:
        copied = self.__class__(self._mode, list(self._components))
        copied.name = self.name
        return copied

    def __copy__(self) -> Color:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Color:
        return self.clone()

    def equals(self, other: ColorInput) -> bool:
        """
        Whether ``other`` is the same color.

        Same name wins; same mode compares the three color components
        exactly; otherwise the 6-digit hex forms are compared. Neither
        color's mode is changed.
        """
        if not isinstance(other, Color):
            other = self.create(other)

        if other.name and self.name and other.name == self.name:
            return True

        if other.mode == self._mode:
            return other._components[:3] == self._components[:3]

        return other.clone().hex6 == self.clone().hex6

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------ SERIALIZATION ------------------
    def css(self, format: Union[CssFormat, str] = CssFormat.RGBA, alpha: Optional[float] = None) -> str:
        """
        Render as CSS.

        Args:
            format: One of "hex", "hsl", "hsla", "rgb", "rgba"
            alpha: Alpha to write instead of the color's own

        Raises:
            UnsupportedCssFormat: any other format
        """
        try:
            css_format = CssFormat(format)
        except ValueError as exc:
            raise UnsupportedCssFormat(f"Unsupported css format: {format!r}") from exc

        alpha = value_or_default(alpha, self.alpha)

        if css_format == CssFormat.HEX:
            return rgb_to_hex(self.rgb + [alpha])

        obj: Dict[str, Any] = self.get(mode=css_format.function_mode, abbreviated=True)
        if css_format.has_alpha:
            obj[ALPHA_KEY] = alpha
        else:
            del obj[ALPHA_KEY]
        return color_to_css(obj)

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self._mode.value!r}, components={self._components!r})"
