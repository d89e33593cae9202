import pytest

from chromaconv.conversions.to_lab import xyz_to_lab, EPSILON, KAPPA
from chromaconv.conversions.to_xyz import rgb_deep_to_xyz, lab_to_xyz
from chromaconv.spaces.reference_white import DEFAULT_REFERENCE_WHITE, REFERENCE_WHITES, get_reference_white
from ..samples import samples_rgb_true_xyz


def test_constants_are_exact_rationals():
    assert EPSILON == 216 / 24389
    assert KAPPA == 24389 / 27
    assert EPSILON * KAPPA == pytest.approx(8.0)


def test_rgb_deep_to_xyz_primaries():
    for rgb_true, xyz in samples_rgb_true_xyz.items():
        rgb = tuple(c / 255 for c in rgb_true)
        assert rgb_deep_to_xyz(*rgb) == pytest.approx(xyz, abs=1e-3)


def test_reference_white_maps_to_full_lightness():
    for white in REFERENCE_WHITES.values():
        assert xyz_to_lab(*white, reference_white=white) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)


def test_black_maps_to_zero_lightness():
    assert xyz_to_lab(0.0, 0.0, 0.0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_red_to_lab():
    l, a, b = xyz_to_lab(41.24564, 21.26729, 1.93339)
    assert abs(l - 53.24) < 0.05
    assert abs(a - 80.09) < 0.05
    assert abs(b - 67.20) < 0.05


def test_lab_to_xyz_white():
    assert lab_to_xyz(100.0, 0.0, 0.0) == pytest.approx(tuple(DEFAULT_REFERENCE_WHITE))


def test_lab_to_xyz_dark_branch():
    # below the eps * kappa breakpoint Y comes straight from L / kappa
    x, y, z = lab_to_xyz(5.0, 0.0, 0.0)
    assert y == pytest.approx(5.0 / KAPPA * 100.0)


def test_lab_xyz_round_trip():
    white = get_reference_white("D50", 2)
    for lab in ((50.0, 20.0, -30.0), (5.0, 1.0, -1.0), (90.0, -60.0, 70.0), (30.0, 0.0, 0.0)):
        xyz = lab_to_xyz(*lab, reference_white=white)
        assert xyz_to_lab(*xyz, reference_white=white) == pytest.approx(lab, abs=1e-9)
