from spectra.conversions.to_hsl import hsv_to_hsl, np_hsv_to_hsl, np_unit_rgb_to_hsl, unit_rgb_to_hsl
from spectra.samples import samples_rgb_hsl, samples_rgb_hsv
import numpy as np


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r / 255, g / 255, b / 255)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys())) / 255
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsl, expected, atol=1e-9)

def test_saturation_zero_at_black_and_white():
    assert unit_rgb_to_hsl(0.0, 0.0, 0.0)[1] == 0.0
    assert unit_rgb_to_hsl(1.0, 1.0, 1.0)[1] == 0.0

def test_saturation_never_exceeds_one():
    hsl = np_unit_rgb_to_hsl(np.linspace(0, 1, 256), 0.0, 1.0)
    assert np.all(hsl[..., 1] <= 1.0)
    assert np.all(hsl[..., 1] >= 0.0)

def test_hsv_to_hsl():
    for rgb, (h, s, v) in samples_rgb_hsv.items():
        h_exp, s_exp, l_exp = samples_rgb_hsl[rgb]
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert h_out == h
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9

def test_hsv_to_hsl_numpy():
    hsv = np.array([samples_rgb_hsv[rgb] for rgb in samples_rgb_hsl])
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(result, expected, atol=1e-9)
