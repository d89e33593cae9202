import logging
from typing import Any, Optional, Tuple

from boundednumbers.functions import clamp01

from ..spaces.working_space import RGBWorkingSpace, SRGB
from ..types.color_types import Triple
from ..utils.num_utils import round_half_up, round_to_int

logger = logging.getLogger(__name__)

# XYZ -> RGB results are rounded to this many decimals unless the caller opts out;
# read at call time, set to None to keep full precision everywhere
XYZ_TO_RGB_DECIMALS: Optional[int] = 1
_UNSET: Any = object()
_GAMUT_TOLERANCE = 1e-4


def rgb_true_to_rgb_deep(r: int, g: int, b: int) -> Triple:
    return r / 255.0, g / 255.0, b / 255.0


def rgb_deep_to_rgb_true(r: float, g: float, b: float) -> Tuple[int, int, int]:
    return round_to_int(r * 255), round_to_int(g * 255), round_to_int(b * 255)


def grey_to_rgb(grey: float) -> Triple:
    return grey, grey, grey


def cmyk_to_rgb_deep(c: float, m: float, y: float, k: float) -> Triple:
    return (1.0 - c) * (1.0 - k), (1.0 - m) * (1.0 - k), (1.0 - y) * (1.0 - k)


def hsv_to_rgb_deep(h: float, s: float, v: float) -> Triple:
    """
    Convert HSV to RGB (0..1).

    Args:
        h: Hue in degrees (360 is treated as 0)
        s: Saturation (0..1)
        v: Value (0..1)

    Returns:
        (r, g, b) in 0..1
    """
    chroma = v * s
    h_prime = (h % 360.0) / 60.0
    x = chroma * (1.0 - abs(h_prime % 2.0 - 1.0))
    m = v - chroma

    sector = int(h_prime)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def _hue_to_channel(high: float, low: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0

    if t < 1.0 / 6.0:
        return low + (high - low) * 6.0 * t
    if t < 0.5:
        return high
    if t < 2.0 / 3.0:
        return low + (high - low) * (2.0 / 3.0 - t) * 6.0
    return low


def hsl_to_rgb_deep(h: float, s: float, l: float) -> Triple:
    """Convert HSL to RGB (0..1); zero lightness is black regardless of hue."""
    if l == 0:
        return 0.0, 0.0, 0.0

    if l < 0.5:
        high = l * (1.0 + s)
    else:
        high = l + s - l * s
    low = 2.0 * l - high

    t = h / 360.0
    return (
        _hue_to_channel(high, low, t + 1.0 / 3.0),
        _hue_to_channel(high, low, t),
        _hue_to_channel(high, low, t - 1.0 / 3.0),
    )


def linear_rgb_deep_to_rgb_deep(r: float, g: float, b: float,
                                working_space: RGBWorkingSpace = SRGB) -> Triple:
    return working_space.delinearize(r, g, b)


def xyz_to_rgb_deep(
    x: float,
    y: float,
    z: float,
    working_space: RGBWorkingSpace = SRGB,
    decimals: Optional[int] = _UNSET,
) -> Triple:
    """
    Convert XYZ (Y = 100 scale) to encoded RGB (0..1) in ``working_space``.

    Components outside the working space's gamut are clamped to [0, 1].
    The clamped result is then rounded to ``decimals`` places (default:
    the current ``XYZ_TO_RGB_DECIMALS``); pass ``decimals=None`` to keep
    full precision.
    """
    if decimals is _UNSET:
        decimals = XYZ_TO_RGB_DECIMALS
    linear = working_space.xyz_to_linear_rgb(x / 100.0, y / 100.0, z / 100.0)
    encoded = linear_rgb_deep_to_rgb_deep(*linear, working_space=working_space)

    if any(c < -_GAMUT_TOLERANCE or c > 1.0 + _GAMUT_TOLERANCE for c in encoded):
        logger.warning(
            "XYZ(%g, %g, %g) is outside the %s gamut; clamping %s to [0, 1]",
            x, y, z, working_space.name, encoded,
        )

    clamped = tuple(clamp01(c) for c in encoded)
    if decimals is None:
        return clamped  # type: ignore[return-value]
    return tuple(round_half_up(c, decimals) for c in clamped)  # type: ignore[return-value]
