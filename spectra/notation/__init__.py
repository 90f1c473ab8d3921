"""
CSS-style notations
===================

Parsing of hex, ``rgb()/rgba()``, ``hsl()/hsla()`` and named colors, and the
matching string/number serializers. Named colors come from the CSS3 table
shipped with ``webcolors``.
"""

from .parser import ParsedColor, parse_color
from .serializer import (
    to_hex,
    to_rgb_number,
    to_rgb_string,
    to_rgba_string,
    to_hsl_string,
    to_hsla_string,
    to_name,
)

__all__ = [
    "ParsedColor",
    "parse_color",
    "to_hex",
    "to_rgb_number",
    "to_rgb_string",
    "to_rgba_string",
    "to_hsl_string",
    "to_hsla_string",
    "to_name",
]
