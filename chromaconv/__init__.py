"""Chromaconv: colorimetric conversions between RGB, grey, CMYK, HSV, HSL, XYZ and L*a*b*."""

from .colors.rgb import RGBTrueColor, RGBDeepColor
from .colors.grey import GreyTrueColor, GreyDeepColor
from .colors.cmyk import CMYK
from .colors.hsv import HSV
from .colors.hsl import HSL
from .colors.xyz import XYZ
from .colors.lab import Lab
from .colors.color_base import ColorBase
from .colors.color import color_convert, kind_to_class, get_color_class

from .conversions import (
    convert,
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
from .spaces import (
    ReferenceWhite,
    Illuminant,
    Observer,
    REFERENCE_WHITES,
    DEFAULT_REFERENCE_WHITE,
    get_reference_white,
    GammaCurve,
    PowerGammaCurve,
    PiecewiseGammaCurve,
    RGBWorkingSpace,
    WORKING_SPACES,
    DEFAULT_WORKING_SPACE_NAME,
    SRGB,
    get_working_space,
)
from .types import ColorKind
from .exceptions import ChromaconvError, UnsupportedConversion, InvalidArgument, OutOfRange

__version__ = "0.1.0"

__all__ = [
    "RGBTrueColor",
    "RGBDeepColor",
    "GreyTrueColor",
    "GreyDeepColor",
    "CMYK",
    "HSV",
    "HSL",
    "XYZ",
    "Lab",
    "ColorBase",
    "color_convert",
    "kind_to_class",
    "get_color_class",
    "convert",
    "to_rgb_true",
    "to_rgb_deep",
    "to_grey_true",
    "to_grey_deep",
    "to_cmyk",
    "to_hsv",
    "to_hsl",
    "to_xyz",
    "to_lab",
    "ReferenceWhite",
    "Illuminant",
    "Observer",
    "REFERENCE_WHITES",
    "DEFAULT_REFERENCE_WHITE",
    "get_reference_white",
    "GammaCurve",
    "PowerGammaCurve",
    "PiecewiseGammaCurve",
    "RGBWorkingSpace",
    "WORKING_SPACES",
    "DEFAULT_WORKING_SPACE_NAME",
    "SRGB",
    "get_working_space",
    "ColorKind",
    "ChromaconvError",
    "UnsupportedConversion",
    "InvalidArgument",
    "OutOfRange",
]
