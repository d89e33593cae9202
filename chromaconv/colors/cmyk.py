from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, channel


class CMYK(ColorBase):
    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.CMYK
    num_channels:  ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("cyan", "magenta", "yellow", "black")
    minima:        ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)

    cyan = channel(0)
    magenta = channel(1)
    yellow = channel(2)
    black = channel(3)
