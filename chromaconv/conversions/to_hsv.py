from ..types.color_types import Triple
from ..utils.num_utils import round_to_int


def rgb_deep_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB (0..1) to HSV.

    Hue is rounded to whole degrees in [0, 360); achromatic input
    (r == g == b) yields hue 0 and saturation 0.
    """
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    if delta == 0:
        return 0.0, 0.0, high

    if high == r:
        sector = ((g - b) / delta) % 6.0
    elif high == g:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0

    hue = float(round_to_int(sector * 60.0) % 360)
    return hue, delta / high, high


def hsl_to_hsv(h: float, s: float, l: float) -> Triple:
    l2 = 2.0 * l
    m = s * (l2 if l2 <= 1.0 else 2.0 - l2)
    total = l2 + m
    v = total / 2.0
    s_v = 2.0 * m / total if total != 0 else 0.0
    return h, s_v, v
