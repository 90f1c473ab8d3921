from spectra.notation import (
    to_hex,
    to_hsl_string,
    to_hsla_string,
    to_name,
    to_rgb_number,
    to_rgb_string,
    to_rgba_string,
)
from spectra.samples import samples_rgb_hsl
from spectra.utils.num_utils import format_number


def test_hex_is_lowercase_six_digits():
    assert to_hex(68, 170, 255) == "#44aaff"
    assert to_hex(0, 0, 0) == "#000000"
    assert to_hex(255, 25, 75) == "#ff194b"

def test_rgb_number():
    assert to_rgb_number(68, 170, 255) == 0x44aaff
    assert to_rgb_number(0, 0, 0) == 0
    assert to_rgb_number(255, 255, 255) == 0xffffff

def test_rgb_strings():
    assert to_rgb_string(68, 170, 255) == "rgb(68,170,255)"
    assert to_rgba_string(68, 170, 255, 1.0) == "rgba(68,170,255,1)"
    assert to_rgba_string(255, 25, 75, 0.6) == "rgba(255,25,75,0.6)"
    assert to_rgba_string(255, 25, 75, 0.6 + 0.07) == "rgba(255,25,75,0.67)"

def test_hsl_strings():
    h, s, l = samples_rgb_hsl[(68, 170, 255)]
    assert to_hsl_string(h, s, l) == "hsl(207,1,0.63)"
    assert to_hsla_string(h, s, l, 1.0) == "hsla(207,1,0.63,1)"
    assert to_hsla_string(h, s, l, 0.25) == "hsla(207,1,0.63,0.25)"

def test_hsl_string_hue_wraps_after_rounding():
    assert to_hsl_string(359.6, 0.5, 0.5) == "hsl(0,0.5,0.5)"

def test_hsl_string_rounds_half_up():
    assert to_hsl_string(10.5, 0.125, 0.005) == "hsl(11,0.13,0.01)"

def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(0) == "0"
    assert format_number(0.6) == "0.6"
    assert format_number(0.6699999999999999) == "0.67"

def test_to_name():
    assert to_name(0, 128, 128) == "teal"
    assert to_name(255, 255, 255) == "white"
    assert to_name(255, 25, 75) is None
