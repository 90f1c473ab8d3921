from spectra import Color, InvalidColorInput, coerce_color
from spectra.samples import samples_rgb_hsv, samples_rgb_hsl, samples_hex_rgb
import pytest


@pytest.fixture
def color():
    return Color({"r": 255, "g": 25, "b": 75, "a": 0.6})


def test_rgb_mapping(color):
    assert color.red == 255
    assert color.green == 25
    assert color.blue == 75
    assert color.hex() == "#ff194b"
    assert color.alpha == 0.6

def test_alpha_defaults_to_one():
    assert Color({"r": 255, "g": 25, "b": 75}).alpha == 1
    assert Color({"r": 255, "g": 25, "b": 75, "a": None}).alpha == 1

def test_black_has_hue_zero():
    assert Color({"r": 0, "g": 0, "b": 0}).hue == 0

def test_hsv_mapping(color):
    assert Color({"h": 347, "s": 0.9020, "v": 1.000, "a": 0.6}).equals(color)

def test_hsl_mapping(color):
    assert Color({"h": 347, "s": 1.000, "l": 0.549, "a": 0.6}).equals(color)

def test_shorthand_hex():
    color = Color("#4Af")
    assert color.red == 68
    assert color.green == 170
    assert color.blue == 255
    assert color.hue == 207
    assert color.saturationv == pytest.approx(0.73, abs=0.01)
    assert color.value == pytest.approx(1.0)
    assert color.hex() == "#44aaff"
    assert color.rgba_string() == "rgba(68,170,255,1)"
    assert color.hsl_string() == "hsl(207,1,0.63)"
    assert color.hsla_string() == "hsla(207,1,0.63,1)"
    assert color.rgb_number() == 0x44aaff

def test_longhand_hex():
    assert Color("#FF194b").equals(Color({"r": 255, "g": 25, "b": 75}))

def test_hex_samples():
    for text, rgb in samples_hex_rgb.items():
        assert Color(text).rgb() == rgb

def test_rgb_strings():
    assert Color("rgb(255,25, 75)").equals({"r": 255, "g": 25, "b": 75})
    color = Color({"r": 255, "g": 25, "b": 75, "a": 0.6})
    assert Color("rgba(255,25, 75, 0.6)").equals(color)
    assert Color("rgba(255,25, 75, .6)").equals(color)

def test_hsl_string_round_trips():
    color = Color("hsla(347,1,0.549,0.6)")
    assert color.rgba() == (255, 25, 75, 0.6)

def test_named_colors():
    assert Color("white").equals(Color({"r": 255, "g": 255, "b": 255}))
    assert Color("teal").equals(Color("#008080"))
    assert Color("teal").name() == "teal"

def test_copy_from_color(color):
    copy = Color(color)
    assert copy.equals(color)
    assert copy is not color
    copy.set_red(0)
    assert color.red == 255

def test_from_constructors(color):
    assert Color.from_rgb(255, 25, 75, 0.6).equals(color)
    assert Color.from_hsv(347, 0.902, 1.0, 0.6).equals(color)
    assert Color.from_hsl(347, 1.0, 0.549, 0.6).equals(color)
    assert Color.from_string("#deadbeef", hex_alpha=True).rgb() == (0xde, 0xad, 0xbe)

def test_cylindrical_samples():
    for rgb, (h, s, v) in samples_rgb_hsv.items():
        assert Color.from_hsv(h, s, v).rgb() == rgb
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        assert Color.from_hsl(h, s, l).rgb() == rgb

def test_views_are_consistent():
    for rgb, hsv in samples_rgb_hsv.items():
        color = Color.from_rgb(*rgb)
        assert color.hsv() == pytest.approx(hsv)
        assert color.hsl() == pytest.approx(samples_rgb_hsl[rgb])

@pytest.mark.parametrize("value", [
    "not a real color",
    "#deadbeef",
    None,
    True,
    False,
    42,
    3.5,
    ["#fff"],
    (255, 25, 75),
    object(),
    {"r": 255, "g": 25},
    {"x": 1},
    {"r": "255", "g": 25, "b": 75},
    {"r": 255, "g": 25, "b": 75, "a": "0.5"},
    {"r": True, "g": 25, "b": 75},
    {"r": float("nan"), "g": 25, "b": 75},
])
def test_invalid_inputs(value):
    with pytest.raises(InvalidColorInput):
        Color(value)

def test_from_rgb_rejects_non_numbers():
    with pytest.raises(InvalidColorInput):
        Color.from_rgb(None, 0, 0)  # type: ignore[arg-type]

def test_coerce_color(color):
    assert coerce_color(color) is color
    assert coerce_color("#ff194b").rgb() == (255, 25, 75)
    assert coerce_color({"h": 0, "s": 1, "v": 1}).hex() == "#ff0000"
    with pytest.raises(InvalidColorInput):
        coerce_color(None)  # type: ignore[arg-type]

def test_equality(color):
    assert color == Color("rgba(255,25,75,0.6)")
    assert color != Color("rgba(255,25,75,0.5)")
    assert color != Color("#ff194c")
    assert (color == "#ff194b") is False
    assert color.equals("rgba(255,25,75,0.6)")

def test_unhashable(color):
    with pytest.raises(TypeError):
        hash(color)

def test_repr_round_trips(color):
    assert repr(color) == "Color('rgba(255,25,75,0.6)')"
    assert eval(repr(color), {"Color": Color}).equals(color)

def test_to_dict(color):
    assert color.to_dict() == {"r": 255, "g": 25, "b": 75, "a": 0.6}
    assert Color(color.to_dict()).equals(color)
