from ..spaces.reference_white import DEFAULT_REFERENCE_WHITE, ReferenceWhite
from ..spaces.working_space import RGBWorkingSpace, SRGB
from ..types.color_types import Triple
from .to_lab import EPSILON, KAPPA


def rgb_deep_to_linear_rgb_deep(r: float, g: float, b: float,
                                working_space: RGBWorkingSpace = SRGB) -> Triple:
    return working_space.linearize(r, g, b)


def rgb_deep_to_xyz(r: float, g: float, b: float,
                    working_space: RGBWorkingSpace = SRGB) -> Triple:
    """Encoded RGB (0..1) -> XYZ on the Y = 100 scale."""
    linear = rgb_deep_to_linear_rgb_deep(r, g, b, working_space)
    x, y, z = working_space.linear_rgb_to_xyz(*linear)
    return x * 100.0, y * 100.0, z * 100.0


def lab_to_xyz(l: float, a: float, b: float,
               reference_white: ReferenceWhite = DEFAULT_REFERENCE_WHITE) -> Triple:
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = fx3 if fx3 > EPSILON else (116.0 * fx - 16.0) / KAPPA
    yr = fy ** 3 if l > EPSILON * KAPPA else l / KAPPA
    zr = fz3 if fz3 > EPSILON else (116.0 * fz - 16.0) / KAPPA

    return xr * reference_white.x, yr * reference_white.y, zr * reference_white.z
