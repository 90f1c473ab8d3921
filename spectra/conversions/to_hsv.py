from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray


def rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees of a unit RGB color, taken from the channel that holds
    the maximum. Achromatic colors (r == g == b) have hue 0.
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)

    if delta == 0:
        return 0.0
    if max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240
    return 0.0 if hue >= 360 else hue


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: rgb_hue over broadcastable unit RGB arrays."""
    max_c = np.maximum.reduce([r, g, b])
    delta = max_c - np.minimum.reduce([r, g, b])

    hue = np.zeros(max_c.shape, dtype=float)
    mask = delta > 0
    # Ties resolve red first, then green, like the scalar branch order
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240
    return np.where(hue >= 360, 0.0, hue)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    value = max_c
    saturation = 0.0 if max_c == 0 else (max_c - min_c) / max_c
    return rgb_hue(r, g, b), saturation, value


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
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

    saturation = np.zeros(out_shape, dtype=float)
    mask = max_c > 0
    saturation[mask] = (max_c[mask] - min_c[mask]) / max_c[mask]

    return np.stack([np_rgb_hue(r, g, b), saturation, max_c], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV without passing through RGB. Hue is unchanged."""
    value = l + s * min(l, 1 - l)
    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return h, saturation, value


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    value = l + s * np.minimum(l, 1 - l)
    saturation = np.zeros(out_shape, dtype=float)
    mask = value > 0
    saturation[mask] = 2 * (1 - l[mask] / value[mask])

    return np.stack([h, saturation, value], axis=-1)
