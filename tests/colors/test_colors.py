import math

import pytest

from chromaconv.colors import (
    ColorBase,
    RGBTrueColor,
    RGBDeepColor,
    GreyTrueColor,
    GreyDeepColor,
    CMYK,
    HSV,
    HSL,
    XYZ,
    Lab,
    kind_to_class,
    get_color_class,
)
from chromaconv.exceptions import InvalidArgument, OutOfRange, UnsupportedConversion
from chromaconv.spaces.working_space import SRGB, get_working_space
from chromaconv.types import ColorKind


def test_construction_and_accessors():
    rgb = RGBTrueColor(255, 128, 0, alpha=200)
    assert rgb.components == (255, 128, 0)
    assert (rgb.red, rgb.green, rgb.blue) == (255, 128, 0)
    assert rgb.alpha == 200
    assert rgb.kind == ColorKind.RGB_TRUE

    cmyk = CMYK(0.1, 0.2, 0.3, 0.4)
    assert (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.black) == (0.1, 0.2, 0.3, 0.4)

    hsv = HSV(200.0, 0.5, 0.25)
    assert (hsv.hue, hsv.saturation, hsv.value) == (200.0, 0.5, 0.25)

    hsl = HSL(200.0, 0.5, 0.25)
    assert hsl.lightness == 0.25

    lab = Lab(50.0, -20.0, 30.0)
    assert (lab.luminance, lab.a, lab.b) == (50.0, -20.0, 30.0)

    xyz = XYZ(1.0, 2.0, 3.0)
    assert (xyz.x, xyz.y, xyz.z) == (1.0, 2.0, 3.0)

    assert GreyTrueColor(12).grey == 12
    assert GreyDeepColor(0.5).grey == 0.5


def test_default_alpha_is_opaque():
    assert RGBTrueColor(0, 0, 0).alpha == 255
    assert GreyTrueColor(0).alpha == 255
    assert RGBDeepColor(0, 0, 0).alpha == 1.0
    assert Lab(0, 0, 0).alpha == 1.0


def test_default_working_space_is_srgb():
    assert RGBDeepColor(0, 0, 0).working_space is SRGB
    assert Lab(0, 0, 0).working_space is SRGB


def test_component_bounds():
    assert RGBTrueColor(0, 0, 0).component_min == (0, 0, 0)
    assert RGBTrueColor(0, 0, 0).component_max == (255, 255, 255)
    assert HSV(0, 0, 0).component_max == (360.0, 1.0, 1.0)
    assert Lab(0, 0, 0).component_min == (0.0, -128.0, -128.0)
    assert Lab(0, 0, 0).component_max == (100.0, 128.0, 128.0)


def test_clamping_on_construction():
    assert RGBTrueColor(300, -5, 128).components == (255, 0, 128)
    assert RGBDeepColor(1.5, -0.5, 0.5).components == (1.0, 0.0, 0.5)
    assert HSV(400.0, 2.0, -1.0).components == (360.0, 1.0, 0.0)
    assert Lab(120.0, -200.0, 200.0).components == (100.0, -128.0, 128.0)
    assert XYZ(-1.0, 250.0, 50.0).components == (0.0, 200.0, 50.0)
    assert CMYK(1.5, -0.2, 0.5, 2.0).components == (1.0, 0.0, 0.5, 1.0)
    assert HSL(-10.0, 1.4, 1.2).components == (0.0, 1.0, 1.0)
    assert RGBTrueColor(0, 0, 0, alpha=999).alpha == 255
    assert CMYK(0, 0, 0, 0, alpha=-1).alpha == 0.0


def test_true_color_rounds_half_up():
    assert RGBTrueColor(0.5, 1.5, 2.4).components == (1, 2, 2)
    assert GreyTrueColor(127.5).grey == 128
    assert isinstance(RGBTrueColor(1.0, 2.0, 3.0).red, int)


def test_infinity_clamps():
    assert RGBDeepColor(math.inf, -math.inf, 0.5).components == (1.0, 0.0, 0.5)


def test_nan_is_rejected():
    with pytest.raises(InvalidArgument):
        RGBDeepColor(math.nan, 0.0, 0.0)
    with pytest.raises(InvalidArgument):
        HSV(0.0, 0.0, 0.0, alpha=math.nan)


def test_wrong_component_count():
    with pytest.raises(InvalidArgument):
        RGBTrueColor(1, 2)
    with pytest.raises(InvalidArgument):
        CMYK(0.1, 0.2, 0.3)


def test_get_component():
    cmyk = CMYK(0.1, 0.2, 0.3, 0.4)
    assert cmyk.get_component(0) == 0.1
    assert cmyk.get_component(3) == 0.4
    with pytest.raises(OutOfRange):
        cmyk.get_component(4)
    with pytest.raises(OutOfRange):
        cmyk.get_component(-1)
    with pytest.raises(IndexError):
        GreyDeepColor(0.5).get_component(1)


def test_with_component():
    rgb = RGBTrueColor(10, 20, 30)
    assert rgb.with_component(1, 300).components == (10, 255, 30)
    assert rgb.components == (10, 20, 30)
    with pytest.raises(OutOfRange):
        rgb.with_component(3, 0)


def test_replace():
    cmyk = CMYK(0.1, 0.2, 0.3, 0.4, alpha=0.5)
    changed = cmyk.replace(cyan=2.0, black=0.0)
    assert changed.components == (1.0, 0.2, 0.3, 0.0)
    assert changed.alpha == 0.5
    with pytest.raises(InvalidArgument):
        cmyk.replace(red=1.0)


def test_immutable():
    rgb = RGBTrueColor(1, 2, 3)
    with pytest.raises(AttributeError):
        rgb.red = 5
    with pytest.raises(AttributeError):
        rgb._components = (4, 5, 6)
    with pytest.raises(AttributeError):
        rgb.anything = 1


def test_with_alpha_and_working_space():
    adobe = get_working_space("Adobe RGB (1998)")
    rgb = RGBDeepColor(0.1, 0.2, 0.3)
    assert rgb.with_alpha(0.25).alpha == 0.25
    assert rgb.with_alpha(3.0).alpha == 1.0
    moved = rgb.with_working_space(adobe)
    assert moved.working_space is adobe
    assert moved == rgb
    assert rgb.working_space is SRGB


def test_equality_ignores_alpha():
    a = RGBTrueColor(1, 2, 3, alpha=0)
    b = RGBTrueColor(1, 2, 3, alpha=255)
    assert a == b
    assert hash(a) == hash(b)
    assert not a.equals_with_alpha(b)
    assert a.equals_with_alpha(RGBTrueColor(1, 2, 3, alpha=0))


def test_equality_across_kinds():
    assert HSV(0.0, 0.5, 0.5) != HSL(0.0, 0.5, 0.5)
    assert RGBTrueColor(0, 0, 0) != RGBDeepColor(0, 0, 0)
    assert RGBTrueColor(0, 0, 0) != (0, 0, 0)


def test_from_color():
    source = HSV(10.0, 0.2, 0.3, alpha=0.4)
    base: ColorBase = source
    copy = HSV.from_color(base)
    assert copy.equals_with_alpha(source)
    assert copy is not source

    with pytest.raises(InvalidArgument):
        HSL.from_color(source)
    with pytest.raises(InvalidArgument):
        CMYK.from_color((0.1, 0.2, 0.3, 0.4))


def test_iteration_and_len():
    assert list(RGBTrueColor(1, 2, 3)) == [1, 2, 3]
    assert len(CMYK(0, 0, 0, 0)) == 4
    assert len(GreyDeepColor(0.5)) == 1


def test_repr():
    assert repr(RGBTrueColor(1, 2, 3)) == "RGBTrueColor(red=1, green=2, blue=3, alpha=255)"
    assert repr(GreyDeepColor(0.5, alpha=0.25)) == "GreyDeepColor(grey=0.5, alpha=0.25)"


def test_uniform():
    assert RGBTrueColor.uniform(42).components == (42, 42, 42)
    assert RGBDeepColor.uniform(0.5, alpha=0.5).alpha == 0.5


def test_registry():
    assert set(kind_to_class) == set(ColorKind)
    for kind, cls in kind_to_class.items():
        assert cls.kind == kind
    assert get_color_class("lab") is Lab
    assert get_color_class(ColorKind.CMYK) is CMYK
    with pytest.raises(UnsupportedConversion):
        get_color_class("yuv")
