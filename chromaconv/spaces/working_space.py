"""
RGB Working-Space Definitions
=============================

A working space bundles the RGB -> XYZ matrix (derived from the primaries'
chromaticities and the white point) with a gamma curve. RGB-family colors
carry a reference to one so they can be taken to and from XYZ.

Matrix derivation (http://brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html):

    P = [[xr/yr,           xg/yg,           xb/yb          ],
         [1,               1,               1              ],
         [(1-xr-yr)/yr,    (1-xg-yg)/yg,    (1-xb-yb)/yb   ]]
    S = P^-1 . W
    M = P * S   (column-wise)

Working spaces are immutable and shared; conversions only read them.
"""

from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from .gamma import GammaCurve, PiecewiseGammaCurve, PowerGammaCurve, SRGB_CURVE, REC709_CURVE
from ..exceptions import InvalidArgument, UnsupportedConversion
from ..types.color_types import Triple

logger = logging.getLogger(__name__)

Chromaticity = Tuple[float, float]

# White points as XYZ with Y = 1
WHITE_D50: Triple = (0.96422, 1.0, 0.82521)
WHITE_D65: Triple = (0.95047, 1.0, 1.08883)


def xy_to_xyz(x: float, y: float, Y: float = 1.0) -> Triple:
    """Chromaticity (x, y) and luminance Y to XYZ; y == 0 yields black."""
    if y == 0:
        return 0.0, 0.0, 0.0
    return x * Y / y, Y, (1.0 - x - y) * Y / y


def rgb_to_xyz_matrix(
    red: Chromaticity,
    green: Chromaticity,
    blue: Chromaticity,
    white_point: Triple,
) -> np.ndarray:
    """Create the linear RGB -> XYZ matrix for the given primaries and white point."""
    primaries = np.array([xy_to_xyz(*red), xy_to_xyz(*green), xy_to_xyz(*blue)], dtype=float).T
    try:
        scale = np.linalg.solve(primaries, np.asarray(white_point, dtype=float))
    except np.linalg.LinAlgError as exc:
        raise InvalidArgument(f"Primaries {red}, {green}, {blue} are collinear") from exc
    if np.any(scale <= 0):
        warnings.warn(
            f"White point {white_point} lies outside the primaries' gamut; "
            "the resulting matrix has non-positive channel scales"
        )
    return primaries * scale


@dataclass(frozen=True, eq=False)
class RGBWorkingSpace:
    name: str
    rgb_to_xyz: np.ndarray
    gamma_curve: GammaCurve
    white_point: Triple = WHITE_D65
    xyz_to_rgb: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        matrix = np.array(self.rgb_to_xyz, dtype=float)
        if matrix.shape != (3, 3):
            raise InvalidArgument(f"{self.name}: RGB -> XYZ matrix must be 3x3, got {matrix.shape}")
        try:
            inverse = np.linalg.inv(matrix)
        except np.linalg.LinAlgError as exc:
            raise InvalidArgument(f"{self.name}: RGB -> XYZ matrix is singular") from exc
        matrix.setflags(write=False)
        inverse.setflags(write=False)
        # frozen dataclass: bypass __setattr__ for the derived fields
        object.__setattr__(self, "rgb_to_xyz", matrix)
        object.__setattr__(self, "xyz_to_rgb", inverse)

    @classmethod
    def from_chromaticities(
        cls,
        name: str,
        red: Chromaticity,
        green: Chromaticity,
        blue: Chromaticity,
        gamma_curve: GammaCurve,
        white_point: Triple = WHITE_D65,
    ) -> RGBWorkingSpace:
        matrix = rgb_to_xyz_matrix(red, green, blue, white_point)
        logger.debug("Derived RGB -> XYZ matrix for %s:\n%s", name, matrix)
        return cls(name, matrix, gamma_curve, tuple(white_point))

    # ------------------ companding ------------------
    def linearize(self, r: float, g: float, b: float) -> Triple:
        """Encoded RGB -> linear-light RGB."""
        inverse = self.gamma_curve.inverse_gamma_correction
        return inverse(r), inverse(g), inverse(b)

    def delinearize(self, r: float, g: float, b: float) -> Triple:
        """Linear-light RGB -> encoded RGB."""
        forward = self.gamma_curve.gamma_correction
        return forward(r), forward(g), forward(b)

    # ------------------ matrices ------------------
    def linear_rgb_to_xyz(self, r: float, g: float, b: float) -> Triple:
        x, y, z = self.rgb_to_xyz @ np.array((r, g, b), dtype=float)
        return float(x), float(y), float(z)

    def xyz_to_linear_rgb(self, x: float, y: float, z: float) -> Triple:
        r, g, b = self.xyz_to_rgb @ np.array((x, y, z), dtype=float)
        return float(r), float(g), float(b)

    def __repr__(self) -> str:
        return f"RGBWorkingSpace({self.name!r})"


def _preset(name, red, green, blue, gamma_curve, white_point=WHITE_D65) -> RGBWorkingSpace:
    return RGBWorkingSpace.from_chromaticities(name, red, green, blue, gamma_curve, white_point)


#   name                    red                 green               blue                curve                              white
_PRESETS = (
    _preset("sRGB",             (0.6400, 0.3300), (0.3000, 0.6000), (0.1500, 0.0600), SRGB_CURVE),
    _preset("Adobe RGB (1998)", (0.6400, 0.3300), (0.2100, 0.7100), (0.1500, 0.0600), PowerGammaCurve(2 + 51 / 256)),
    _preset("Apple RGB",        (0.6250, 0.3400), (0.2800, 0.5950), (0.1550, 0.0700), PowerGammaCurve(1.8)),
    _preset("ColorMatch RGB",   (0.6300, 0.3400), (0.2950, 0.6050), (0.1500, 0.0750), PowerGammaCurve(1.8), WHITE_D50),
    _preset("ProPhoto RGB",     (0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001), PowerGammaCurve(1.8), WHITE_D50),
    _preset("Wide Gamut RGB",   (0.7350, 0.2650), (0.1150, 0.8260), (0.1570, 0.0180), PowerGammaCurve(2.2), WHITE_D50),
    _preset("Rec. 709",         (0.6400, 0.3300), (0.3000, 0.6000), (0.1500, 0.0600), REC709_CURVE),
    _preset("Rec. 2020",        (0.7080, 0.2920), (0.1700, 0.7970), (0.1310, 0.0460), REC709_CURVE),
)

WORKING_SPACES: Dict[str, RGBWorkingSpace] = {space.name: space for space in _PRESETS}
_LOOKUP = {name.lower(): space for name, space in WORKING_SPACES.items()}

DEFAULT_WORKING_SPACE_NAME = "sRGB"
SRGB = WORKING_SPACES[DEFAULT_WORKING_SPACE_NAME]


def get_working_space(name: str = DEFAULT_WORKING_SPACE_NAME) -> RGBWorkingSpace:
    """
    Return a preset working space by name (case-insensitive).

    Raises:
        UnsupportedConversion: If no preset has that name.
    """
    space = _LOOKUP.get(name.lower())
    if space is None:
        raise UnsupportedConversion(
            f"Unknown working space {name!r}; available: {', '.join(WORKING_SPACES)}"
        )
    return space


__all__ = [
    "RGBWorkingSpace",
    "PiecewiseGammaCurve",
    "PowerGammaCurve",
    "WORKING_SPACES",
    "DEFAULT_WORKING_SPACE_NAME",
    "SRGB",
    "WHITE_D50",
    "WHITE_D65",
    "get_working_space",
    "rgb_to_xyz_matrix",
    "xy_to_xyz",
]
