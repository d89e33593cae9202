"""
Chromaconv Color Classes
========================

Immutable color values for the nine supported kinds. Every class shares one
storage and clamping discipline (``ColorBase``): components are clamped to the
kind's bounds on construction and on every derived value, and "mutators"
return new values.

Kinds
-----
RGBTrueColor   red, green, blue       0..255 (integral), alpha 0..255
RGBDeepColor   red, green, blue       0..1
GreyTrueColor  grey                   0..255 (integral), alpha 0..255
GreyDeepColor  grey                   0..1
CMYK           cyan, magenta, yellow, black   0..1
HSV            hue, saturation, value         (0..360, 0..1, 0..1)
HSL            hue, saturation, lightness     (0..360, 0..1, 0..1)
XYZ            x, y, z                0..200 (Y = 100 scale)
Lab            luminance, a, b        (0..100, -128..128, -128..128)

Usage
-----
>>> from chromaconv.colors import RGBTrueColor
>>> red = RGBTrueColor(255, 0, 0, alpha=255)
>>> red.to_cmyk()
CMYK(cyan=0.0, magenta=1.0, yellow=1.0, black=0.0, alpha=1.0)
>>> red.replace(green=300)
RGBTrueColor(red=255, green=255, blue=0, alpha=255)
"""

from .color_base import ColorBase, RGBLike, build_registry
from .rgb import RGBTrueColor, RGBDeepColor
from .grey import GreyTrueColor, GreyDeepColor
from .cmyk import CMYK
from .hsv import HSV
from .hsl import HSL
from .xyz import XYZ
from .lab import Lab
from .color import kind_to_class, get_color_class

__all__ = [
    "ColorBase",
    "RGBLike",
    "build_registry",
    "RGBTrueColor",
    "RGBDeepColor",
    "GreyTrueColor",
    "GreyDeepColor",
    "CMYK",
    "HSV",
    "HSL",
    "XYZ",
    "Lab",
    "kind_to_class",
    "get_color_class",
]
