import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round half away from zero to ``decimals`` places (``round`` rounds half to even)."""
    factor = 10.0 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def round_to_int(value: float) -> int:
    """Round half away from zero and return an ``int``."""
    return int(round_half_up(value))
