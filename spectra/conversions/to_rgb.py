from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray
from ..utils.num_utils import wrap_hue, np_wrap_hue

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unit RGB with the six-sector algorithm.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    sector_pos = wrap_hue(h) / 60
    sector = int(math.floor(sector_pos)) % 6
    f = sector_pos - math.floor(sector_pos)

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    return [
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    ][sector]


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        v: array-like or scalar, value in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    sector_pos = np_wrap_hue(h) / 60
    sector = np.floor(sector_pos).astype(int) % 6
    f = sector_pos - np.floor(sector_pos)

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)

## HSL to RGB conversions

def hue_to_channel(p: float, q: float, t: float) -> float:
    """One RGB channel from the HSL helper values, ``t`` being a hue in turns."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB, evaluating each channel at a third of a turn
    from its neighbours.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0:
        return l, l, l

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    turns = wrap_hue(h) / 360

    return (
        hue_to_channel(p, q, turns + 1 / 3),
        hue_to_channel(p, q, turns),
        hue_to_channel(p, q, turns - 1 / 3),
    )


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    turns = np_wrap_hue(h) / 360

    r = _np_hue_to_channel(p, q, turns + 1 / 3)
    g = _np_hue_to_channel(p, q, turns)
    b = _np_hue_to_channel(p, q, turns - 1 / 3)

    return np.stack([r, g, b], axis=-1)
