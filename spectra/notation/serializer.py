from __future__ import annotations
from typing import Optional

import webcolors

from ..types.constants import HSL_STRING_DIGITS, HUE_MAX
from ..utils.num_utils import format_number, round_half_up


def to_hex(r: int, g: int, b: int) -> str:
    """Lowercase ``#rrggbb``. Alpha is never part of the hex form."""
    return f"#{r:02x}{g:02x}{b:02x}"


def to_rgb_number(r: int, g: int, b: int) -> int:
    """Pack the channels into a 24-bit ``0xRRGGBB`` integer."""
    return (r << 16) | (g << 8) | b


def to_rgb_string(r: int, g: int, b: int) -> str:
    return f"rgb({r},{g},{b})"


def to_rgba_string(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r},{g},{b},{format_number(a)})"


def _hsl_parts(h: float, s: float, l: float) -> str:
    scale = 10 ** HSL_STRING_DIGITS
    hue = round_half_up(h) % int(HUE_MAX)
    saturation = round_half_up(s * scale) / scale
    lightness = round_half_up(l * scale) / scale
    return f"{hue},{format_number(saturation)},{format_number(lightness)}"


def to_hsl_string(h: float, s: float, l: float) -> str:
    """
    ``hsl(h,s,l)`` with the hue as whole degrees and s/l as unit fractions
    (not percentages), e.g. ``hsl(207,1,0.63)``.
    """
    return f"hsl({_hsl_parts(h, s, l)})"


def to_hsla_string(h: float, s: float, l: float, a: float) -> str:
    return f"hsla({_hsl_parts(h, s, l)},{format_number(a)})"


def to_name(r: int, g: int, b: int) -> Optional[str]:
    """CSS3 name of the exact color, or None if it has none."""
    try:
        return webcolors.hex_to_name(to_hex(r, g, b))
    except ValueError:
        return None
