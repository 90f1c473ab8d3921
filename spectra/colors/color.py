from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from ..conversions import convert
from ..errors import InvalidColorInput
from ..notation import (
    parse_color,
    to_hex,
    to_hsl_string,
    to_hsla_string,
    to_name,
    to_rgb_number,
    to_rgb_string,
    to_rgba_string,
)
from ..types.color_types import ColorLike, ColorSpace, CylindricalTuple, RGBATuple, RGBTuple
from ..types.constants import (
    CHANNEL_MAX,
    DARK_LUMA_THRESHOLD,
    EQUALS_TOLERANCE,
    LUMA_WEIGHTS,
    ROUND_DIGITS,
)
from ..utils.num_utils import (
    clamp_channel,
    clamp_unit,
    is_number,
    round_half_up,
    wrap_hue,
)

# Mapping keys per space; alpha ('a') is optional everywhere
_MAPPING_KEYS = (
    (ColorSpace.RGB, ("r", "g", "b")),
    (ColorSpace.HSV, ("h", "s", "v")),
    (ColorSpace.HSL, ("h", "s", "l")),
)


def _require_number(value: Any, name: str, source: Any = None) -> float:
    if not is_number(value):
        raise InvalidColorInput(
            value if source is None else source,
            f"{name} must be a finite number, got {value!r}",
        )
    return float(value)


def _read_mapping(value: Mapping) -> Tuple[ColorSpace, Tuple[float, float, float], float]:
    for space, keys in _MAPPING_KEYS:
        if all(key in value for key in keys):
            channels = tuple(_require_number(value[key], key, value) for key in keys)
            alpha = value.get("a")
            alpha = 1.0 if alpha is None else _require_number(alpha, "a", value)
            return space, channels, alpha  # type: ignore[return-value]
    raise InvalidColorInput(value, "expected keys r,g,b or h,s,v or h,s,l")


class Color:
    """
    A color value readable and writable in RGB, HSV and HSL.

    The state keeps integer RGB channels, an alpha in [0, 1], and both the
    HSV and HSL triples. Whichever space was written last keeps the exact
    values it was given; the other two are derived from it, so all three
    views always describe the same color.

    Derived operations (``complement``, ``mix``, ``harmony``...) return new
    instances. Only the ``set_*`` methods, and assignment to the channel
    properties, change a color in place.

    >>> c = Color("#4Af")
    >>> c.red, c.green, c.blue, c.hue
    (68, 170, 255, 207)
    >>> c.hsl_string()
    'hsl(207,1,0.63)'
    """

    __slots__ = ("_rgb", "_alpha", "_hsv", "_hsl")

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, Color):
            self._copy_state(value)
            return

        if isinstance(value, str):
            space, channels, alpha = parse_color(value)
        elif isinstance(value, Mapping):
            space, channels, alpha = _read_mapping(value)
        else:
            raise InvalidColorInput(value, f"unsupported input type {type(value).__name__}")

        self._load(space, channels, alpha)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def _build(cls, space: ColorSpace, channels: Tuple[float, float, float], alpha: float) -> Color:
        color = cls.__new__(cls)
        color._load(space, channels, alpha)
        return color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Build from 0-255 channels; fractional channels are rounded once."""
        channels = tuple(_require_number(c, name) for c, name in zip((r, g, b), "rgb"))
        return cls._build(ColorSpace.RGB, channels, _require_number(a, "a"))  # type: ignore[arg-type]

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        channels = tuple(_require_number(c, name) for c, name in zip((h, s, v), "hsv"))
        return cls._build(ColorSpace.HSV, channels, _require_number(a, "a"))  # type: ignore[arg-type]

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        channels = tuple(_require_number(c, name) for c, name in zip((h, s, l), "hsl"))
        return cls._build(ColorSpace.HSL, channels, _require_number(a, "a"))  # type: ignore[arg-type]

    @classmethod
    def from_string(cls, text: str, *, hex_alpha: bool = False) -> Color:
        """Parse ``text``; see :func:`spectra.notation.parse_color` for the forms."""
        space, channels, alpha = parse_color(text, hex_alpha=hex_alpha)
        return cls._build(space, channels, alpha)

    # ------------------ STATE ------------------
    def _load(self, space: ColorSpace, channels: Tuple[float, float, float], alpha: float) -> None:
        """Store ``channels`` as given (clamped) and re-derive the other spaces."""
        self._alpha = clamp_unit(alpha)

        if space == ColorSpace.RGB:
            self._rgb = tuple(clamp_channel(c) for c in channels)
            unit = tuple(c / CHANNEL_MAX for c in self._rgb)
            self._hsv = self._cylindrical(convert(unit, ColorSpace.RGB, ColorSpace.HSV))
            self._hsl = self._cylindrical(convert(unit, ColorSpace.RGB, ColorSpace.HSL))
            return

        h, s, third = channels
        exact = (wrap_hue(h), clamp_unit(s), clamp_unit(third))
        other = ColorSpace.HSL if space == ColorSpace.HSV else ColorSpace.HSV
        derived = self._cylindrical(convert(exact, space, other))
        unit = convert(exact, space, ColorSpace.RGB)
        self._rgb = tuple(clamp_channel(c * CHANNEL_MAX) for c in unit)

        if space == ColorSpace.HSV:
            self._hsv, self._hsl = exact, derived
        else:
            self._hsl, self._hsv = exact, derived

        r, g, b = self._rgb
        if r == g == b:
            # grays have no hue
            self._hsv = (0.0,) + self._hsv[1:]
            self._hsl = (0.0,) + self._hsl[1:]

    @staticmethod
    def _cylindrical(triple: Tuple[float, float, float]) -> CylindricalTuple:
        h, s, third = triple
        return wrap_hue(h), clamp_unit(s), clamp_unit(third)

    def _copy_state(self, other: Color) -> None:
        self._rgb = other._rgb
        self._alpha = other._alpha
        self._hsv = other._hsv
        self._hsl = other._hsl

    def copy(self) -> Color:
        color = self.__class__.__new__(self.__class__)
        color._copy_state(self)
        return color

    # ------------------ TUPLE VIEWS ------------------
    def rgb(self) -> RGBTuple:
        return self._rgb  # type: ignore[return-value]

    def rgba(self) -> RGBATuple:
        return self._rgb + (self._alpha,)  # type: ignore[return-value]

    def hsv(self) -> CylindricalTuple:
        """Exact (hue, saturation, value); hue is not rounded here."""
        return self._hsv

    def hsl(self) -> CylindricalTuple:
        """Exact (hue, saturation, lightness); hue is not rounded here."""
        return self._hsl

    def to_dict(self) -> dict:
        r, g, b = self._rgb
        return {"r": r, "g": g, "b": b, "a": self._alpha}

    # ------------------ CHANNELS ------------------
    @property
    def red(self) -> int:
        return self._rgb[0]

    @red.setter
    def red(self, value: float) -> None:
        self.set_red(value)

    @property
    def green(self) -> int:
        return self._rgb[1]

    @green.setter
    def green(self, value: float) -> None:
        self.set_green(value)

    @property
    def blue(self) -> int:
        return self._rgb[2]

    @blue.setter
    def blue(self, value: float) -> None:
        self.set_blue(value)

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self.set_alpha(value)

    @property
    def hue(self) -> int:
        """Hue in whole degrees, [0, 360). Use :meth:`hsv` for the exact angle."""
        return round_half_up(self._hsv[0]) % 360

    @hue.setter
    def hue(self, value: float) -> None:
        self.set_hue(value)

    @property
    def saturationv(self) -> float:
        return self._hsv[1]

    @saturationv.setter
    def saturationv(self, value: float) -> None:
        self.set_saturationv(value)

    @property
    def value(self) -> float:
        return self._hsv[2]

    @value.setter
    def value(self, value: float) -> None:
        self.set_value(value)

    @property
    def saturationl(self) -> float:
        return self._hsl[1]

    @saturationl.setter
    def saturationl(self, value: float) -> None:
        self.set_saturationl(value)

    @property
    def lightness(self) -> float:
        return self._hsl[2]

    @lightness.setter
    def lightness(self, value: float) -> None:
        self.set_lightness(value)

    # In-place setters: clamp (hue wraps), then re-derive every space.
    def _set_rgb(self, index: int, value: float) -> None:
        channels = list(self._rgb)
        channels[index] = _require_number(value, "rgb"[index])
        self._load(ColorSpace.RGB, tuple(channels), self._alpha)  # type: ignore[arg-type]

    def _set_cylindrical(self, space: ColorSpace, index: int, value: float, name: str) -> None:
        channels = list(self._hsv if space == ColorSpace.HSV else self._hsl)
        channels[index] = _require_number(value, name)
        self._load(space, tuple(channels), self._alpha)  # type: ignore[arg-type]

    def set_red(self, value: float) -> None:
        self._set_rgb(0, value)

    def set_green(self, value: float) -> None:
        self._set_rgb(1, value)

    def set_blue(self, value: float) -> None:
        self._set_rgb(2, value)

    def set_alpha(self, value: float) -> None:
        self._alpha = clamp_unit(_require_number(value, "alpha"))

    def set_hue(self, value: float) -> None:
        self._set_cylindrical(ColorSpace.HSV, 0, value, "hue")

    def set_saturationv(self, value: float) -> None:
        self._set_cylindrical(ColorSpace.HSV, 1, value, "saturationv")

    def set_value(self, value: float) -> None:
        self._set_cylindrical(ColorSpace.HSV, 2, value, "value")

    def set_saturationl(self, value: float) -> None:
        self._set_cylindrical(ColorSpace.HSL, 1, value, "saturationl")

    def set_lightness(self, value: float) -> None:
        self._set_cylindrical(ColorSpace.HSL, 2, value, "lightness")

    # Pure counterparts: same clamping, applied to a copy.
    def _with(self, setter: Callable[[Color, float], None], value: float) -> Color:
        color = self.copy()
        setter(color, value)
        return color

    def with_red(self, value: float) -> Color:
        return self._with(Color.set_red, value)

    def with_green(self, value: float) -> Color:
        return self._with(Color.set_green, value)

    def with_blue(self, value: float) -> Color:
        return self._with(Color.set_blue, value)

    def with_alpha(self, value: float) -> Color:
        return self._with(Color.set_alpha, value)

    def with_hue(self, value: float) -> Color:
        return self._with(Color.set_hue, value)

    def with_saturationv(self, value: float) -> Color:
        return self._with(Color.set_saturationv, value)

    def with_value(self, value: float) -> Color:
        return self._with(Color.set_value, value)

    def with_saturationl(self, value: float) -> Color:
        return self._with(Color.set_saturationl, value)

    def with_lightness(self, value: float) -> Color:
        return self._with(Color.set_lightness, value)

    # ------------------ SERIALIZATION ------------------
    def hex(self) -> str:
        return to_hex(*self._rgb)

    def rgb_number(self) -> int:
        return to_rgb_number(*self._rgb)

    def rgb_string(self) -> str:
        return to_rgb_string(*self._rgb)

    def rgba_string(self) -> str:
        return to_rgba_string(*self._rgb, self._alpha)

    def hsl_string(self) -> str:
        return to_hsl_string(*self._hsl)

    def hsla_string(self) -> str:
        return to_hsla_string(*self._hsl, self._alpha)

    def name(self) -> Optional[str]:
        """CSS3 color name matching the RGB channels exactly, if any."""
        return to_name(*self._rgb)

    # ------------------ COMPARISON ------------------
    def equals(self, other: ColorLike) -> bool:
        """Same RGB channels and (within a tight tolerance) the same alpha."""
        other = coerce_color(other)
        return self._rgb == other._rgb and abs(self._alpha - other._alpha) <= EQUALS_TOLERANCE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rgba_string()!r})"

    # ------------------ DERIVED COLORS ------------------
    def complement(self) -> Color:
        """Opposite hue (+180°), same saturation, value and alpha."""
        h, s, v = self._hsv
        return self.from_hsv(h + 180, s, v, self._alpha)

    def negate(self) -> Color:
        """Each RGB channel replaced by ``255 - channel``; alpha unchanged."""
        r, g, b = self._rgb
        return self.from_rgb(CHANNEL_MAX - r, CHANNEL_MAX - g, CHANNEL_MAX - b, self._alpha)

    invert = negate

    def _shift_hsl(self, saturation: float = 0.0, lightness: float = 0.0) -> Color:
        h, s, l = self._hsl
        return self.from_hsl(h, clamp_unit(s + saturation), clamp_unit(l + lightness), self._alpha)

    def lighten(self, amount: float) -> Color:
        """Raise HSL lightness by ``amount`` percentage points."""
        return self._shift_hsl(lightness=_require_number(amount, "amount") / 100)

    def darken(self, amount: float) -> Color:
        return self._shift_hsl(lightness=-_require_number(amount, "amount") / 100)

    def saturate(self, amount: float) -> Color:
        """Raise HSL saturation by ``amount`` percentage points."""
        return self._shift_hsl(saturation=_require_number(amount, "amount") / 100)

    def desaturate(self, amount: float) -> Color:
        return self._shift_hsl(saturation=-_require_number(amount, "amount") / 100)

    def fade_in(self, amount: float) -> Color:
        """Raise alpha by ``amount`` percentage points (more opaque)."""
        return self.with_alpha(self._alpha + _require_number(amount, "amount") / 100)

    def fade_out(self, amount: float) -> Color:
        return self.with_alpha(self._alpha - _require_number(amount, "amount") / 100)

    def luma(self) -> float:
        """Rec. 709 weighted luminance on the 0-255 scale."""
        return round(sum(w * c for w, c in zip(LUMA_WEIGHTS, self._rgb)), ROUND_DIGITS)

    def grayscale(self, method: str = "lightness") -> Color:
        """
        Gray version of this color, alpha unchanged.

        Args:
            method: ``"lightness"`` drops HSL saturation to 0 and keeps the
                lightness; ``"luma"`` uses ``round(luma())`` for every channel.

        Raises:
            ValueError: For any other method name.
        """
        if method == "lightness":
            h, _, l = self._hsl
            return self.from_hsl(h, 0.0, l, self._alpha)
        if method == "luma":
            gray = round_half_up(self.luma())
            return self.from_rgb(gray, gray, gray, self._alpha)
        raise ValueError(f"Unknown grayscale method {method!r}; use 'lightness' or 'luma'")

    def is_dark(self) -> bool:
        return self.luma() < DARK_LUMA_THRESHOLD

    def is_light(self) -> bool:
        return not self.is_dark()

    # Blend modes, interpolation and palettes live in blend.py / harmony.py
    def mix(self, other: ColorLike, weight: float = 50) -> Color:
        from .blend import mix  # local import to avoid cycles
        return mix(self, coerce_color(other), _require_number(weight, "weight"))

    def gradient(self, other: ColorLike, steps: int) -> List[Color]:
        from .blend import gradient
        return gradient(self, coerce_color(other), steps)

    def multiply(self, other: ColorLike) -> Color:
        from .blend import multiply
        return multiply(self, coerce_color(other))

    def screen(self, other: ColorLike) -> Color:
        from .blend import screen
        return screen(self, coerce_color(other))

    def harmony(self, scheme: Optional[str] = None, index: Any = None) -> List[Color]:
        from .harmony import harmony
        return harmony(self, scheme, index, stacklevel=3)


def coerce_color(value: ColorLike) -> Color:
    """
    Turn any accepted color input into a Color.

    Existing Colors are returned as they are (operations never mutate their
    arguments); mappings and strings go through the Color constructor.

    Raises:
        InvalidColorInput: If the value is not a color.
    """
    if isinstance(value, Color):
        return value
    return Color(value)
