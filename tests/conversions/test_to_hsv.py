from spectra.conversions.to_hsv import hsl_to_hsv, np_hsl_to_hsv, np_unit_rgb_to_hsv, rgb_hue, unit_rgb_to_hsv
from spectra.samples import samples_rgb_hsv, samples_rgb_hsl
import numpy as np


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r / 255, g / 255, b / 255)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9

def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys())) / 255
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected, atol=1e-9)

def test_hue_is_zero_for_grays():
    for level in (0, 1, 64, 128, 254, 255):
        assert rgb_hue(level / 255, level / 255, level / 255) == 0.0

def test_hue_stays_below_360():
    # red maximum with a tiny negative green-blue difference
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 1e-17)
    assert 0.0 <= h < 360.0

def test_saturation_zero_for_black():
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)

def test_hsl_to_hsv():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        h_exp, s_exp, v_exp = samples_rgb_hsv[rgb]
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert h_out == h
        assert abs(v_out - v_exp) < 1e-9
        # grays carry no saturation in either space
        assert abs(s_out - s_exp) < 1e-9

def test_hsl_to_hsv_numpy():
    hsl = np.array([samples_rgb_hsl[rgb] for rgb in samples_rgb_hsv])
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_hsl_to_hsv(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    assert np.allclose(result, expected, atol=1e-9)
