from __future__ import annotations
from enum import Enum
from typing import Any, Mapping, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
CylindricalTuple = Tuple[float, float, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"


# Anything Color() accepts: an existing Color, a channel mapping
# ({r,g,b[,a]}, {h,s,v[,a]}, {h,s,l[,a]}) or a CSS-style string.
ColorLike = Union["Color", Mapping[str, Any], str]
