"""
Spectra Color Space Conversions
===============================

Bidirectional RGB ↔ HSV ↔ HSL conversions, as scalar functions for single
colors and vectorized numpy functions for batches.

Conventions
-----------
- RGB channels are unit floats in [0, 1] (callers divide 0-255 channels by 255)
- Hue is in degrees, [0, 360); achromatic colors have hue 0
- Saturation, value and lightness are in [0, 1]

Conversion Functions
--------------------

RGB → HSV / HSL:
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)

HSV / HSL → RGB:
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v), np_hsv_to_hsl(h, s, v)
    hsl_to_hsv(h, s, l), np_hsl_to_hsv(h, s, l)

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from spectra.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 25 / 255, 75 / 255)
>>> round(h, 2), round(s, 3), v
(346.96, 0.902, 1.0)
>>> [round(c * 255) for c in hsv_to_unit_rgb(h, s, v)]
[255, 25, 75]
"""

# RGB → HSV conversions
from .to_hsv import (
    rgb_hue,
    np_rgb_hue,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
)

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    np_unit_rgb_to_hsl,
)

# HSV / HSL → RGB conversions
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
)

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    'rgb_hue',
    'np_rgb_hue',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',
    'convert',
    'np_convert',
]
