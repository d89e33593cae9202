"""
Gamma / companding curves.

``gamma_correction`` maps linear-light values to encoded values,
``inverse_gamma_correction`` maps encoded values back to linear light.
Curves operate on single floats in the nominal [0, 1] range; values outside
that range are passed through the same formulas without clamping (callers
clamp).
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..exceptions import InvalidArgument


class GammaCurve(ABC):

    @abstractmethod
    def gamma_correction(self, linear: float) -> float:
        """Linear light -> encoded value."""

    @abstractmethod
    def inverse_gamma_correction(self, encoded: float) -> float:
        """Encoded value -> linear light."""


@dataclass(frozen=True)
class PowerGammaCurve(GammaCurve):
    """Pure power law ``encoded = linear ** (1 / gamma)``; negative input mirrors the sign."""

    gamma: float

    def __post_init__(self):
        if not self.gamma > 0:
            raise InvalidArgument(f"gamma must be positive, got {self.gamma!r}")

    def gamma_correction(self, linear: float) -> float:
        return math.copysign(abs(linear) ** (1.0 / self.gamma), linear)

    def inverse_gamma_correction(self, encoded: float) -> float:
        return math.copysign(abs(encoded) ** self.gamma, encoded)


@dataclass(frozen=True)
class PiecewiseGammaCurve(GammaCurve):
    """
    Linear segment near black joined to an offset power law.

    With the defaults this is the sRGB curve (IEC 61966-2-1):

        linear = encoded / 12.92                         if encoded <= 0.04045
        linear = ((encoded + 0.055) / 1.055) ** 2.4      otherwise

    The linear-side breakpoint is ``threshold / slope`` (0.0031308 for sRGB).
    """

    exponent: float = 2.4
    offset: float = 0.055
    slope: float = 12.92
    threshold: float = 0.04045

    def __post_init__(self):
        if not (self.exponent > 0 and self.slope > 0 and self.offset >= 0):
            raise InvalidArgument(
                f"Invalid piecewise gamma parameters: exponent={self.exponent}, "
                f"offset={self.offset}, slope={self.slope}"
            )

    @property
    def linear_threshold(self) -> float:
        return self.threshold / self.slope

    def gamma_correction(self, linear: float) -> float:
        if linear <= self.linear_threshold:
            return linear * self.slope
        return (1.0 + self.offset) * linear ** (1.0 / self.exponent) - self.offset

    def inverse_gamma_correction(self, encoded: float) -> float:
        if encoded <= self.threshold:
            return encoded / self.slope
        return ((encoded + self.offset) / (1.0 + self.offset)) ** self.exponent


SRGB_CURVE = PiecewiseGammaCurve()
# ITU-R BT.709 OETF: 1.099 * L ** 0.45 - 0.099 above L = 0.018
REC709_CURVE = PiecewiseGammaCurve(exponent=1 / 0.45, offset=0.099, slope=4.5, threshold=0.081)
LINEAR_CURVE = PowerGammaCurve(1.0)
