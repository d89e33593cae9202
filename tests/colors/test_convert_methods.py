import pytest

from chromaconv.colors import RGBTrueColor, HSV, Lab, CMYK, XYZ
from chromaconv.spaces.reference_white import get_reference_white
from chromaconv.types import ColorKind


def test_convert_method():
    red = RGBTrueColor(255, 0, 0)
    hsv = red.convert("hsv")
    assert isinstance(hsv, HSV)
    assert hsv.components == pytest.approx((0.0, 1.0, 1.0))
    assert red.convert(ColorKind.RGB_TRUE) is red


def test_to_kind_methods():
    red = RGBTrueColor(255, 0, 0)
    assert isinstance(red.to_cmyk(), CMYK)
    assert isinstance(red.to_lab(), Lab)
    assert red.to_hsv() == red.convert(ColorKind.HSV)
    assert red.to_lab.__name__ == "to_lab"


def test_to_kind_method_reference_white():
    xyz = XYZ(50.0, 50.0, 50.0)
    d50 = get_reference_white("D50")
    assert xyz.to_lab(d50) == xyz.convert("lab", d50)
    assert xyz.to_lab(d50) != xyz.to_lab()
