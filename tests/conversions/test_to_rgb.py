import numpy as np
from csscolors.conversions import hsl_to_rgb, hsl_to_unit_rgb, np_hsl_to_unit_rgb
from csscolors.units import Ratio
from ..samples import samples_rgb_hsl, samples_unit_rgb_hsl


def test_hsl_to_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        out = hsl_to_rgb(h, Ratio.from_percentage(s), Ratio.from_percentage(l))
        assert all(abs(x - y) <= 1 for x, y in zip(out, (r_exp, g_exp, b_exp))), out


def test_hsl_to_rgb_exact_values():
    assert hsl_to_rgb(90, 255, 128) == (128, 255, 1)
    assert hsl_to_rgb(0, 255, 128) == (255, 1, 1)
    assert hsl_to_rgb(120, 255, 51) == (0, 102, 0)
    assert hsl_to_rgb(200, 0, 77) == (77, 77, 77)


def test_hsl_to_rgb_wraps_hue():
    assert hsl_to_rgb(360, 255, 128) == hsl_to_rgb(0, 255, 128)
    assert hsl_to_rgb(-60, 255, 128) == hsl_to_rgb(300, 255, 128)


def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_unit_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_exp) < 1e-9
        assert abs(g - g_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_hsl_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_unit_rgb_hsl.values()))
    expected = np.array(list(samples_unit_rgb_hsl.keys()))
    rgb = np_hsl_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert rgb.shape == expected.shape
    assert np.allclose(rgb, expected)


def test_numpy_matches_scalar_across_sectors():
    hues = np.arange(0, 360, 7, dtype=float)
    rgb = np_hsl_to_unit_rgb(hues, 0.6, 0.4)
    for h, out in zip(hues, rgb):
        assert np.allclose(out, hsl_to_unit_rgb(h, 0.6, 0.4))
