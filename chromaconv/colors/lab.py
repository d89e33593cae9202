from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, channel


class Lab(ColorBase):
    """CIE 1976 L*a*b*."""

    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.LAB
    num_channels:  ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, str, str]] = ("luminance", "a", "b")
    minima:        ClassVar[Tuple[float, float, float]] = (0.0, -128.0, -128.0)
    maxima:        ClassVar[Tuple[float, float, float]] = (100.0, 128.0, 128.0)

    luminance = channel(0, "L*, 0-100.")
    a = channel(1, "Green (-) to red (+).")
    b = channel(2, "Blue (-) to yellow (+).")
