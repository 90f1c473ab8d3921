from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from .to_hsv import rgb_hue, np_rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Saturation is 0 for black, white and every gray.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0 or lightness in (0.0, 1.0):
        saturation = 0.0
    else:
        saturation = min(delta / (1 - abs(2 * lightness - 1)), 1.0)

    return rgb_hue(r, g, b), saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape, dtype=float)
    mask = (delta > 0) & (lightness > 0) & (lightness < 1)
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))

    return np.stack([np_rgb_hue(r, g, b), np.minimum(saturation, 1.0), lightness], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL without passing through RGB. Hue is unchanged."""
    lightness = v * (1 - s / 2)
    if lightness in (0.0, 1.0):
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return h, saturation, lightness


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    lightness = v * (1 - s / 2)
    saturation = np.zeros(out_shape, dtype=float)
    mask = (lightness > 0) & (lightness < 1)
    saturation[mask] = (v[mask] - lightness[mask]) / np.minimum(lightness[mask], 1 - lightness[mask])

    return np.stack([h, saturation, lightness], axis=-1)
