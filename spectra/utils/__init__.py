from .num_utils import (
    is_number,
    round_half_up,
    np_round_half_up,
    clamp,
    clamp_unit,
    clamp_channel,
    wrap_hue,
    np_wrap_hue,
    format_number,
)
from .default import value_or_default

__all__ = [
    "is_number",
    "round_half_up",
    "np_round_half_up",
    "clamp",
    "clamp_unit",
    "clamp_channel",
    "wrap_hue",
    "np_wrap_hue",
    "format_number",
    "value_or_default",
]
