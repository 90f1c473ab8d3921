"""
Hue-rotation palettes.

Schemes and their hue offsets (degrees) before rotation by ``index``:

- complement (default): 0, 180
- analogous: -30, 0, 30, rotated so the receiver sits at position ``index``
- triad: 0, 120, 240
- rectangle: 0, 60, 180, 240
- square: 0, 90, 180, 270

``index`` wraps with a non-negative modulo over the scheme's color count.
Bad arguments never raise: an unknown scheme or a non-integer index falls
back to the two-color complement palette.
"""
from __future__ import annotations
import numbers
import warnings
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from ..utils.default import value_or_default

if TYPE_CHECKING:
    from .color import Color


class HarmonyScheme(str, Enum):
    COMPLEMENT = "complement"
    ANALOGOUS = "analogous"
    TRIAD = "triad"
    RECTANGLE = "rectangle"
    SQUARE = "square"


SCHEME_OFFSETS = {
    HarmonyScheme.COMPLEMENT: (0, 180),
    HarmonyScheme.ANALOGOUS: (-30, 0, 30),
    HarmonyScheme.TRIAD: (0, 120, 240),
    HarmonyScheme.RECTANGLE: (0, 60, 180, 240),
    HarmonyScheme.SQUARE: (0, 90, 180, 270),
}


def _rotate(offsets: Tuple[int, ...], shift: int) -> Tuple[int, ...]:
    # Python's % is already non-negative for a positive modulus: -5 % 3 == 1
    shift %= len(offsets)
    return offsets[shift:] + offsets[:shift]


def _resolve_scheme(scheme: Any, stacklevel: int) -> Optional[HarmonyScheme]:
    if scheme is None:
        return HarmonyScheme.COMPLEMENT
    if isinstance(scheme, str):
        try:
            return HarmonyScheme(scheme.strip().lower())
        except ValueError:
            pass
    warnings.warn(
        f"Unknown harmony scheme {scheme!r}; using the complement palette",
        stacklevel=stacklevel,
    )
    return None


def _resolve_index(index: Any) -> Optional[int]:
    index = value_or_default(index, 0)
    if isinstance(index, bool) or not isinstance(index, numbers.Real):
        return None
    if isinstance(index, numbers.Integral):
        return int(index)
    if float(index).is_integer():
        return int(index)
    return None


def harmony_offsets(scheme: Any = None, index: Any = None, *, stacklevel: int = 2) -> Tuple[int, ...]:
    """
    Hue offsets, in output order, for ``scheme`` rotated by ``index``.

    Args:
        scheme: A :class:`HarmonyScheme` or its name; None means complement.
        index: Rotation of the palette; None means 0.
        stacklevel: Passed to ``warnings.warn`` for fallback warnings, counted
            from the caller of this function.
    """
    resolved = _resolve_scheme(scheme, stacklevel + 1)
    position = _resolve_index(index)

    if resolved is None:
        return SCHEME_OFFSETS[HarmonyScheme.COMPLEMENT]
    if position is None:
        warnings.warn(
            f"Invalid harmony index {index!r}; using the complement palette",
            stacklevel=stacklevel,
        )
        return SCHEME_OFFSETS[HarmonyScheme.COMPLEMENT]

    offsets = SCHEME_OFFSETS[resolved]
    if resolved == HarmonyScheme.ANALOGOUS:
        # the 0 offset (entry 1) moves to position ``index``
        return _rotate(offsets, 1 - position)
    return _rotate(offsets, position)


def harmony(color: Color, scheme: Any = None, index: Any = None, *, stacklevel: int = 2) -> List[Color]:
    """
    Palette of colors sharing ``color``'s saturation, value and alpha, at the
    hue offsets of ``scheme``.

    >>> from spectra import Color
    >>> [c.hex() for c in Color("#ff194b").harmony("triad", -5)]
    ['#4bff19', '#194bff', '#ff194b']
    """
    h, s, v = color.hsv()
    build = type(color).from_hsv
    offsets = harmony_offsets(scheme, index, stacklevel=stacklevel + 1)
    return [build(h + offset, s, v, color.alpha) for offset in offsets]
