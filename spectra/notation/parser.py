from __future__ import annotations
import re
from typing import NamedTuple, Tuple

import webcolors

from ..errors import InvalidColorInput
from ..types.color_types import ColorSpace
from ..types.constants import CHANNEL_MAX
from ..utils.num_utils import clamp_channel, clamp_unit, wrap_hue


class ParsedColor(NamedTuple):
    space: ColorSpace
    channels: Tuple[float, float, float]
    alpha: float


_HEX_RE = re.compile(r"#([0-9a-f]+)", re.IGNORECASE)
_FUNCTION_RE = re.compile(r"(rgba?|hsla?)\s*\((.*)\)", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(%?)")
_NAME_RE = re.compile(r"[a-z]+", re.IGNORECASE)

_HEX_LENGTHS = (3, 6)
_HEX_ALPHA_LENGTHS = (4, 8)


def _parse_hex(text: str, digits: str, hex_alpha: bool) -> ParsedColor:
    allowed = _HEX_LENGTHS + (_HEX_ALPHA_LENGTHS if hex_alpha else ())
    if len(digits) not in allowed:
        raise InvalidColorInput(text, f"hex notation needs {' or '.join(map(str, allowed))} digits")

    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = values[3] / CHANNEL_MAX if len(values) == 4 else 1.0
    return ParsedColor(ColorSpace.RGB, (values[0], values[1], values[2]), alpha)


def _parse_arguments(text: str, body: str, expected: int) -> list[tuple[float, bool]]:
    parts = [part.strip() for part in body.split(",")]
    if len(parts) != expected:
        raise InvalidColorInput(text, f"expected {expected} comma-separated values, got {len(parts)}")

    arguments = []
    for part in parts:
        match = _NUMBER_RE.fullmatch(part)
        if match is None:
            raise InvalidColorInput(text, f"{part!r} is not a number")
        is_percent = bool(match.group(1))
        arguments.append((float(part.rstrip("%")), is_percent))
    return arguments


def _parse_function(text: str, name: str, body: str) -> ParsedColor:
    name = name.lower()
    has_alpha = name.endswith("a")
    arguments = _parse_arguments(text, body, 4 if has_alpha else 3)

    alpha = 1.0
    if has_alpha:
        value, is_percent = arguments.pop()
        alpha = clamp_unit(value / 100 if is_percent else value)

    if name.startswith("rgb"):
        channels = []
        for value, is_percent in arguments:
            if is_percent:
                raise InvalidColorInput(text, "rgb channels must be plain numbers")
            channels.append(clamp_channel(value))
        return ParsedColor(ColorSpace.RGB, tuple(channels), alpha)  # type: ignore[arg-type]

    (hue, hue_percent), *rest = arguments
    if hue_percent:
        raise InvalidColorInput(text, "hue must be a plain number of degrees")
    # s and l come as [0, 1] fractions (the serializer's form) or CSS percentages
    s, l = (clamp_unit(value / 100 if is_percent else value) for value, is_percent in rest)
    return ParsedColor(ColorSpace.HSL, (wrap_hue(hue), s, l), alpha)


def _parse_name(text: str, name: str) -> ParsedColor:
    try:
        hex_value = webcolors.name_to_hex(name.lower())
    except ValueError:
        raise InvalidColorInput(text, "unknown color name") from None
    return _parse_hex(text, hex_value[1:], hex_alpha=False)


def parse_color(text: str, *, hex_alpha: bool = False) -> ParsedColor:
    """
    Parse a CSS-style color string.

    Accepted forms (case-insensitive, surrounding whitespace ignored):
        - ``#rgb`` and ``#rrggbb``
        - ``#rgba`` and ``#rrggbbaa`` when ``hex_alpha`` is True
        - ``rgb(r,g,b)`` and ``rgba(r,g,b,a)``; alpha may omit the leading zero
        - ``hsl(h,s,l)`` and ``hsla(h,s,l,a)`` with s/l as fractions or percentages
        - CSS3 color names such as ``white`` or ``teal``

    Args:
        text: The string to parse.
        hex_alpha: Whether 4- and 8-digit hex strings carry an alpha channel.
            When False they are rejected.

    Returns:
        ParsedColor: the space the channels are expressed in, the three
        channels (0-255 ints for rgb, degrees and unit floats for hsl) and alpha.

    Raises:
        InvalidColorInput: If ``text`` is not a string or matches no form.
    """
    if not isinstance(text, str):
        raise InvalidColorInput(text, "expected a string")

    stripped = text.strip()

    match = _HEX_RE.fullmatch(stripped)
    if match:
        return _parse_hex(text, match.group(1), hex_alpha)

    match = _FUNCTION_RE.fullmatch(stripped)
    if match:
        return _parse_function(text, match.group(1), match.group(2))

    if _NAME_RE.fullmatch(stripped):
        return _parse_name(text, stripped)

    raise InvalidColorInput(text, "unrecognized color notation")
