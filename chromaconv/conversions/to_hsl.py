from ..types.color_types import Triple
from .to_hsv import rgb_deep_to_hsv


def hsv_to_hsl(h: float, s: float, v: float) -> Triple:
    l2 = (2.0 - s) * v
    divisor = l2 if l2 <= 1.0 else 2.0 - l2
    s_l = s * v / divisor if divisor != 0 else 0.0
    return h, s_l, l2 / 2.0


def rgb_deep_to_hsl(r: float, g: float, b: float) -> Triple:
    return hsv_to_hsl(*rgb_deep_to_hsv(r, g, b))
