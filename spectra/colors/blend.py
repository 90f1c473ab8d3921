"""
Interpolation and blend modes between two colors.

Every function receives already-coerced colors and returns new instances of
the receiver's class. RGB channels are interpolated as floats and rounded
once, when they are stored as integer channels; alpha is not rounded.
"""
from __future__ import annotations
import numbers
from typing import TYPE_CHECKING, List

import numpy as np

from ..types.constants import CHANNEL_MAX
from ..utils.num_utils import clamp, np_round_half_up

if TYPE_CHECKING:
    from .color import Color


def mix(color: Color, other: Color, weight: float = 50) -> Color:
    """
    Linear interpolation of R, G, B and A.

    Args:
        color: Start color.
        other: End color.
        weight: Percentage leaning toward ``other``, clamped to [0, 100];
            0 gives ``color``, 100 gives ``other``.
    """
    w = clamp(float(weight), 0.0, 100.0) / 100
    start = np.array(color.rgba(), dtype=float)
    end = np.array(other.rgba(), dtype=float)
    r, g, b, a = start * (1 - w) + end * w
    return type(color).from_rgb(r, g, b, a)


def gradient(color: Color, other: Color, steps: int) -> List[Color]:
    """
    ``steps`` colors from ``color`` to ``other`` inclusive, evenly spaced by
    mix weight (step ``i`` sits at ``100 * i / (steps - 1)`` percent).

    A single step yields just ``color``; zero steps yield an empty list.

    Raises:
        TypeError: If ``steps`` is not an integer.
        ValueError: If ``steps`` is negative.
    """
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise TypeError(f"steps must be an integer, got {steps!r}")
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    if steps == 0:
        return []

    weights = np.linspace(0.0, 1.0, steps) if steps > 1 else np.zeros(1)
    start = np.array(color.rgba(), dtype=float)
    end = np.array(other.rgba(), dtype=float)
    rows = start * (1 - weights[:, None]) + end * weights[:, None]

    channels = np_round_half_up(rows[:, :3])
    build = type(color).from_rgb
    return [build(r, g, b, a) for (r, g, b), a in zip(channels.tolist(), rows[:, 3].tolist())]


def multiply(color: Color, other: Color) -> Color:
    """Multiply blend: ``c1 * c2 / 255`` per channel. Keeps ``color``'s alpha."""
    top = np.array(color.rgb(), dtype=float)
    bottom = np.array(other.rgb(), dtype=float)
    r, g, b = top * bottom / CHANNEL_MAX
    return type(color).from_rgb(r, g, b, color.alpha)


def screen(color: Color, other: Color) -> Color:
    """Screen blend: ``255 - (255 - c1) * (255 - c2) / 255``. Keeps ``color``'s alpha."""
    top = np.array(color.rgb(), dtype=float)
    bottom = np.array(other.rgb(), dtype=float)
    r, g, b = CHANNEL_MAX - (CHANNEL_MAX - top) * (CHANNEL_MAX - bottom) / CHANNEL_MAX
    return type(color).from_rgb(r, g, b, color.alpha)
