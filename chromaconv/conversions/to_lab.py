from ..spaces.reference_white import DEFAULT_REFERENCE_WHITE, ReferenceWhite
from ..types.color_types import Triple

# CIE constants as exact rationals
EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0


def _f(t: float) -> float:
    if t > EPSILON:
        return t ** (1.0 / 3.0)
    return (KAPPA * t + 16.0) / 116.0


def xyz_to_lab(x: float, y: float, z: float,
               reference_white: ReferenceWhite = DEFAULT_REFERENCE_WHITE) -> Triple:
    """
    Convert XYZ to CIE L*a*b* relative to ``reference_white``.

    Both the input and the white are on the Y = 100 scale, so the white
    itself maps to (100, 0, 0).
    """
    fx = _f(x / reference_white.x)
    fy = _f(y / reference_white.y)
    fz = _f(z / reference_white.z)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)
