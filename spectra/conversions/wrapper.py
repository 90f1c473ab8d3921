import numpy as np
from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl, np_unit_rgb_to_hsl, np_hsv_to_hsl

Triple = Tuple[float, float, float]

CONVERT_SCALAR: Dict[Tuple[ColorSpace, ColorSpace], Callable[[float, float, float], Triple]] = {
    (ColorSpace.RGB, ColorSpace.HSV): unit_rgb_to_hsv,
    (ColorSpace.RGB, ColorSpace.HSL): unit_rgb_to_hsl,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_unit_rgb,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
}

CONVERT_NUMPY: Dict[Tuple[ColorSpace, ColorSpace], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    (ColorSpace.RGB, ColorSpace.HSV): np_unit_rgb_to_hsv,
    (ColorSpace.RGB, ColorSpace.HSL): np_unit_rgb_to_hsl,
    (ColorSpace.HSV, ColorSpace.RGB): np_hsv_to_unit_rgb,
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): np_hsl_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
}


def convert(color: Triple, from_space: ColorSpace | str, to_space: ColorSpace | str) -> Triple:
    """
    Convert one unit-scaled color between rgb, hsv and hsl.

    RGB channels are in [0, 1], hue in degrees, the other cylindrical
    channels in [0, 1].
    """
    from_space, to_space = ColorSpace(from_space.lower()), ColorSpace(to_space.lower())
    if from_space == to_space:
        return tuple(color)  # type: ignore[return-value]
    return tuple(CONVERT_SCALAR[(from_space, to_space)](*color))  # type: ignore[return-value]


def np_convert(color: np.ndarray, from_space: ColorSpace | str, to_space: ColorSpace | str) -> np.ndarray:
    """Vectorized: convert an array of shape (..., 3) between rgb, hsv and hsl."""
    from_space, to_space = ColorSpace(from_space.lower()), ColorSpace(to_space.lower())
    color = np.asarray(color, dtype=float)
    if from_space == to_space:
        return color
    return CONVERT_NUMPY[(from_space, to_space)](color[..., 0], color[..., 1], color[..., 2])
