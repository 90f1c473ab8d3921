"""
Spectra - Color Values Across RGB, HSV and HSL
==============================================

A small color abstraction: build a color from RGB/HSV/HSL channels or a
CSS-style string, read and write any channel in any space, and derive new
colors from it.

Key Features
------------
- Construction from ``{r,g,b,a}``, ``{h,s,v,a}``, ``{h,s,l,a}``, hex,
  ``rgb()/rgba()``, ``hsl()/hsla()`` and CSS3 color names
- Channel properties with clamping setters, plus pure ``with_*`` variants
- Complement, negate, lighten/darken, saturate/desaturate, fades, luma,
  grayscale, mixing, gradients, harmony palettes, multiply and screen blends
- Scalar and numpy-vectorized RGB ↔ HSV ↔ HSL conversions

Quick Start
-----------
>>> from spectra import Color
>>> color = Color("rgba(255,25,75,.6)")
>>> color.hex(), color.alpha
('#ff194b', 0.6)
>>> [c.hex() for c in color.harmony("square")]
['#ff194b', '#beff19', '#19ffcd', '#5a19ff']

Modules
-------
- colors: the Color class, blend modes and harmony palettes
- conversions: color space conversion functions
- notation: CSS-style parsing and serialization
- types: shared types and constants
"""

from .errors import InvalidColorInput
from .colors import Color, coerce_color, HarmonyScheme, harmony_offsets
from .types import ColorSpace, ColorLike
from .notation import (
    ParsedColor,
    parse_color,
    to_hex,
    to_rgb_number,
    to_rgb_string,
    to_rgba_string,
    to_hsl_string,
    to_hsla_string,
    to_name,
)
from .conversions import (
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_hsl,
    np_hsl_to_hsv,
    convert,
    np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # core color type
    "Color",
    "coerce_color",
    "ColorLike",
    "ColorSpace",
    "HarmonyScheme",
    "harmony_offsets",
    "InvalidColorInput",
    # notation
    "ParsedColor",
    "parse_color",
    "to_hex",
    "to_rgb_number",
    "to_rgb_string",
    "to_rgba_string",
    "to_hsl_string",
    "to_hsla_string",
    "to_name",
    # conversions
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_hsl",
    "np_hsl_to_hsv",
    "convert",
    "np_convert",
    "__version__",
]
