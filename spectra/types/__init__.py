from .color_types import ColorSpace, ColorLike, Scalar, RGBTuple, RGBATuple, CylindricalTuple
from .constants import (
    CHANNEL_MAX,
    HUE_MAX,
    ALPHA_MAX,
    DARK_LUMA_THRESHOLD,
    LUMA_WEIGHTS,
    HSL_STRING_DIGITS,
    ROUND_DIGITS,
    EQUALS_TOLERANCE,
)

__all__ = [
    "ColorSpace",
    "ColorLike",
    "Scalar",
    "RGBTuple",
    "RGBATuple",
    "CylindricalTuple",
    "CHANNEL_MAX",
    "HUE_MAX",
    "ALPHA_MAX",
    "DARK_LUMA_THRESHOLD",
    "LUMA_WEIGHTS",
    "HSL_STRING_DIGITS",
    "ROUND_DIGITS",
    "EQUALS_TOLERANCE",
]
