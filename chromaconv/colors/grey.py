from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase, RGBLike, channel


class GreyTrueColor(ColorBase, RGBLike):
    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.GREY_TRUE
    num_channels:  ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str]] = ("grey",)
    minima:        ClassVar[Tuple[int]] = (0,)
    maxima:        ClassVar[Tuple[int]] = (255,)
    alpha_max:     ClassVar[int] = 255
    integral:      ClassVar[bool] = True

    grey = channel(0, "Grey level, 0-255.")


class GreyDeepColor(ColorBase, RGBLike):
    __slots__ = ()
    kind:          ClassVar[ColorKind] = ColorKind.GREY_DEEP
    num_channels:  ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str]] = ("grey",)
    minima:        ClassVar[Tuple[float]] = (0.0,)
    maxima:        ClassVar[Tuple[float]] = (1.0,)
    alpha_max:     ClassVar[float] = 1.0

    grey = channel(0, "Grey level, 0-1.")
