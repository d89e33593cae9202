from .num_utils import round_half_up, round_to_int
from .default import value_or_default

__all__ = ["round_half_up", "round_to_int", "value_or_default"]
