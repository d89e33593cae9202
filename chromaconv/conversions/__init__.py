"""
Chromaconv Conversion Engine
============================

Scalar conversion formulas between the nine color kinds, plus the dispatch
layer that composes them into a complete network.

Direct edges
------------
RGB_TRUE  <-> RGB_DEEP     ÷255 / ×255, half-up rounding
RGB_*     <-> GREY_*       channel mean / channel duplication
RGB_DEEP  <-> CMYK         k = 1 - max(r, g, b)
RGB_DEEP  <-> HSV          hexagonal hue, whole-degree rounding
HSV       <-> HSL
HSL        -> RGB_DEEP
RGB_DEEP  <-> XYZ          working-space gamma curve and matrix
XYZ       <-> Lab          CIE piecewise, relative to a reference white

Everything else is composed through RGB_DEEP or, from L*a*b*, through XYZ.

>>> from chromaconv.colors import RGBTrueColor
>>> from chromaconv.conversions import to_hsv
>>> to_hsv(RGBTrueColor(255, 0, 0))
HSV(hue=0.0, saturation=1.0, value=1.0, alpha=1.0)
"""

from .to_rgb import (
    rgb_true_to_rgb_deep,
    rgb_deep_to_rgb_true,
    grey_to_rgb,
    cmyk_to_rgb_deep,
    hsv_to_rgb_deep,
    hsl_to_rgb_deep,
    linear_rgb_deep_to_rgb_deep,
    xyz_to_rgb_deep,
)
from .to_grey import (
    rgb_true_to_grey_true,
    rgb_deep_to_grey_deep,
    grey_true_to_grey_deep,
    grey_deep_to_grey_true,
)
from .to_cmyk import rgb_deep_to_cmyk
from .to_hsv import rgb_deep_to_hsv, hsl_to_hsv
from .to_hsl import hsv_to_hsl, rgb_deep_to_hsl
from .to_xyz import rgb_deep_to_linear_rgb_deep, rgb_deep_to_xyz, lab_to_xyz
from .to_lab import xyz_to_lab, EPSILON, KAPPA
from .wrapper import (
    convert,
    normalize_kind,
    from_rgb_true,
    from_rgb_deep,
    from_grey_true,
    from_grey_deep,
    from_cmyk,
    from_hsv,
    from_hsl,
    from_xyz,
    from_lab,
    to_rgb_true,
    to_rgb_deep,
    to_grey_true,
    to_grey_deep,
    to_cmyk,
    to_hsv,
    to_hsl,
    to_xyz,
    to_lab,
)

__all__ = [
    # Dispatch
    "convert",
    "normalize_kind",
    "from_rgb_true",
    "from_rgb_deep",
    "from_grey_true",
    "from_grey_deep",
    "from_cmyk",
    "from_hsv",
    "from_hsl",
    "from_xyz",
    "from_lab",
    "to_rgb_true",
    "to_rgb_deep",
    "to_grey_true",
    "to_grey_deep",
    "to_cmyk",
    "to_hsv",
    "to_hsl",
    "to_xyz",
    "to_lab",
    # Scalar formulas
    "rgb_true_to_rgb_deep",
    "rgb_deep_to_rgb_true",
    "grey_to_rgb",
    "cmyk_to_rgb_deep",
    "hsv_to_rgb_deep",
    "hsl_to_rgb_deep",
    "linear_rgb_deep_to_rgb_deep",
    "xyz_to_rgb_deep",
    "rgb_true_to_grey_true",
    "rgb_deep_to_grey_deep",
    "grey_true_to_grey_deep",
    "grey_deep_to_grey_true",
    "rgb_deep_to_cmyk",
    "rgb_deep_to_hsv",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "rgb_deep_to_hsl",
    "rgb_deep_to_linear_rgb_deep",
    "rgb_deep_to_xyz",
    "lab_to_xyz",
    "xyz_to_lab",
    # Constants
    "EPSILON",
    "KAPPA",
]
