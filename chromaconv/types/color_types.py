from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Triple = Tuple[float, float, float]


class ColorKind(str, Enum):
    RGB_TRUE = "rgb_true"
    RGB_DEEP = "rgb_deep"
    GREY_TRUE = "grey_true"
    GREY_DEEP = "grey_deep"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"
    XYZ = "xyz"
    LAB = "lab"


KindLike = Union[ColorKind, str]
