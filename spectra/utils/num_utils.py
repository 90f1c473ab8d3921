from __future__ import annotations
import math
import numbers
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp, clamp01, cyclic_wrap_float
from ..types.constants import CHANNEL_MAX, HUE_MAX, ROUND_DIGITS


def is_number(value: object) -> bool:
    """True for real, finite numbers (numpy scalars included), False for bools."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with ties away from zero.

    The value is first rounded to ``ROUND_DIGITS`` decimals so that conversion
    noise such as ``243.49999999999997`` still rounds as the exact ``243.5``.
    """
    value = round(float(value), ROUND_DIGITS)
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized: round_half_up over an array, returning an int array."""
    values = np.round(np.asarray(values, dtype=float), ROUND_DIGITS)
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(int)


def clamp_unit(value: float) -> float:
    """Clamp to the inclusive range ``[0, 1]``."""
    return float(clamp01(float(value)))


def clamp_channel(value: float) -> int:
    """Round and clamp to an integer RGB channel in ``[0, 255]``."""
    return int(clamp(round_half_up(value), 0, CHANNEL_MAX))


def wrap_hue(h: float) -> float:
    """Wrap a hue angle into ``[0, 360)``; negative angles wrap forward."""
    h = float(cyclic_wrap_float(float(h), 0.0, HUE_MAX))
    # -1e-17 % 360 == 360.0
    return 0.0 if h >= HUE_MAX else h


def np_wrap_hue(h: NDArray) -> NDArray:
    """Vectorized: Wrap hue angles into ``[0, 360)``."""
    wrap = bound_type_to_np_function[BoundType.CYCLIC]
    h = wrap(np.asarray(h, dtype=float), 0.0, HUE_MAX)
    return np.where(h >= HUE_MAX, 0.0, h)


def format_number(value: float) -> str:
    """
    Render a number the way CSS strings expect it.

    Integral values drop the fractional part (``1.0`` -> ``"1"``), others
    keep their natural precision minus float noise (``0.6699999999999999``
    -> ``"0.67"``).
    """
    value = round(float(value), ROUND_DIGITS)
    if value.is_integer():
        return str(int(value))
    return repr(value)
