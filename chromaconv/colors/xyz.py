from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, channel


class XYZ(ColorBase):
    """CIE 1931 tristimulus values on the Y = 100 scale."""

    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.XYZ
    num_channels:  ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")
    minima:        ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    # wide enough for every tabulated reference white (F4, 10°: X = 114.96)
    maxima:        ClassVar[Tuple[float, float, float]] = (200.0, 200.0, 200.0)

    x = channel(0)
    y = channel(1)
    z = channel(2)
