import pytest

from chromaconv.conversions.to_hsl import hsv_to_hsl, rgb_deep_to_hsl
from ..samples import samples_hsv_hsl, samples_rgb_hsv


def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert h_out == h_exp
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_hsv_to_hsl_zero_divisor():
    # black and white both hit a zero divisor
    assert hsv_to_hsl(30.0, 0.5, 0.0) == (30.0, 0.0, 0.0)
    assert hsv_to_hsl(30.0, 0.0, 1.0) == (30.0, 0.0, 1.0)


def test_rgb_deep_to_hsl_goes_through_hsv():
    for rgb, hsv in samples_rgb_hsv.items():
        assert rgb_deep_to_hsl(*rgb) == pytest.approx(hsv_to_hsl(*hsv))
