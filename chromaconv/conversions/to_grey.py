from ..utils.num_utils import round_to_int


def rgb_true_to_grey_true(r: int, g: int, b: int) -> int:
    """Integer mean of the three channels (truncated)."""
    return (int(r) + int(g) + int(b)) // 3


def rgb_deep_to_grey_deep(r: float, g: float, b: float) -> float:
    return (r + g + b) / 3.0


def grey_true_to_grey_deep(grey: int) -> float:
    return grey / 255.0


def grey_deep_to_grey_true(grey: float) -> int:
    return round_to_int(grey * 255)
