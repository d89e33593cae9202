from chromaconv.conversions.to_hsv import rgb_deep_to_hsv, hsl_to_hsv
from ..samples import samples_rgb_hsv, samples_hsl_hsv


def test_rgb_deep_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = rgb_deep_to_hsv(r, g, b)

        assert h_out == h_exp
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9


def test_rgb_deep_to_hsv_hue_is_whole_degrees():
    h, _, _ = rgb_deep_to_hsv(0.9, 0.31, 0.1)
    assert h == int(h)
    assert 0 <= h < 360


def test_rgb_deep_to_hsv_near_red_wraps_to_zero():
    # a hue just below 360 rounds to 360 and must wrap
    h, _, _ = rgb_deep_to_hsv(1.0, 0.0, 0.001)
    assert h == 0.0


def test_achromatic_fixed_point():
    for grey in (0.0, 0.25, 0.5, 1.0):
        assert rgb_deep_to_hsv(grey, grey, grey) == (0.0, 0.0, grey)


def test_hsl_to_hsv():
    for (h, s, l), (h_exp, s_exp, v_exp) in samples_hsl_hsv.items():
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert h_out == h_exp
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9


def test_hsl_to_hsv_black_has_no_saturation():
    assert hsl_to_hsv(200.0, 0.7, 0.0) == (200.0, 0.0, 0.0)
