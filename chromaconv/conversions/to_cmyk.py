from typing import Tuple


def rgb_deep_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert RGB (0..1) to CMYK (0..1).

    Pure black has no defined ink split; it maps to (0, 0, 0, 1).
    """
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return 0.0, 0.0, 0.0, 1.0
    scale = 1.0 - k
    return (1.0 - r - k) / scale, (1.0 - g - k) / scale, (1.0 - b - k) / scale, k
