from spectra.conversions import convert, np_convert
from spectra.types import ColorSpace
from spectra.samples import samples_rgb_hsv, samples_rgb_hsl
import numpy as np
import pytest


def test_convert_returns_tuple():
    result = convert((1.0, 0.5, 0.25), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_convert_same_space_is_identity():
    assert convert((10.0, 0.5, 0.5), ColorSpace.HSL, "HSL") == (10.0, 0.5, 0.5)

def test_convert_matches_samples():
    for (r, g, b), hsv in samples_rgb_hsv.items():
        hsl = samples_rgb_hsl[(r, g, b)]
        assert np.allclose(convert((r / 255, g / 255, b / 255), "rgb", "hsv"), hsv)
        assert np.allclose(convert((r / 255, g / 255, b / 255), ColorSpace.RGB, ColorSpace.HSL), hsl)
        assert np.allclose(convert(hsv, "hsv", "hsl"), hsl)
        assert np.allclose(convert(hsl, "hsl", "rgb"), (r / 255, g / 255, b / 255))

def test_np_convert_shape():
    rgb = np.array(list(samples_rgb_hsv.keys())).reshape(2, 7, 3) / 255
    hsv = np_convert(rgb, "rgb", "hsv")
    assert hsv.shape == (2, 7, 3)
    assert np.allclose(np_convert(hsv, "hsv", "rgb"), rgb)

def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3), "cmyk", "rgb")
