"""
Parameters the conversion network depends on: reference whites for the
XYZ <-> L*a*b* edges, gamma curves, and RGB working-space definitions for the
RGB <-> XYZ edges.
"""

from .reference_white import (
    ReferenceWhite,
    Illuminant,
    Observer,
    REFERENCE_WHITES,
    DEFAULT_REFERENCE_WHITE,
    get_reference_white,
)
from .gamma import (
    GammaCurve,
    PowerGammaCurve,
    PiecewiseGammaCurve,
    SRGB_CURVE,
    REC709_CURVE,
    LINEAR_CURVE,
)
from .working_space import (
    RGBWorkingSpace,
    WORKING_SPACES,
    DEFAULT_WORKING_SPACE_NAME,
    SRGB,
    get_working_space,
)

__all__ = [
    "ReferenceWhite",
    "Illuminant",
    "Observer",
    "REFERENCE_WHITES",
    "DEFAULT_REFERENCE_WHITE",
    "get_reference_white",
    "GammaCurve",
    "PowerGammaCurve",
    "PiecewiseGammaCurve",
    "SRGB_CURVE",
    "REC709_CURVE",
    "LINEAR_CURVE",
    "RGBWorkingSpace",
    "WORKING_SPACES",
    "DEFAULT_WORKING_SPACE_NAME",
    "SRGB",
    "get_working_space",
]
