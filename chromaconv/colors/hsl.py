from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, channel


class HSL(ColorBase):
    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.HSL
    num_channels:  ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")
    minima:        ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)

    hue = channel(0, "Hue in degrees, 0-360.")
    saturation = channel(1)
    lightness = channel(2)
