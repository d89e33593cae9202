from chromaconv.conversions.to_grey import (
    rgb_true_to_grey_true,
    rgb_deep_to_grey_deep,
    grey_true_to_grey_deep,
    grey_deep_to_grey_true,
)


def test_rgb_true_to_grey_true_truncates_mean():
    assert rgb_true_to_grey_true(255, 0, 0) == 85
    assert rgb_true_to_grey_true(10, 10, 11) == 10
    assert rgb_true_to_grey_true(255, 255, 255) == 255


def test_rgb_deep_to_grey_deep_is_mean():
    assert abs(rgb_deep_to_grey_deep(0.3, 0.6, 0.9) - 0.6) < 1e-12


def test_grey_rescale():
    assert grey_true_to_grey_deep(255) == 1.0
    assert grey_true_to_grey_deep(0) == 0.0
    assert grey_deep_to_grey_true(1.0) == 255
    for grey in range(256):
        assert grey_deep_to_grey_true(grey_true_to_grey_deep(grey)) == grey
