from typing import ClassVar, Optional, Tuple, Self
from ..types.color_types import ColorKind, Scalar
from ..spaces.working_space import RGBWorkingSpace
from .color_base import ColorBase, RGBLike, channel


class _RGBChannels:
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")
    red = channel(0, "Red component.")
    green = channel(1, "Green component.")
    blue = channel(2, "Blue component.")

    @classmethod
    def uniform(cls, value: Scalar, alpha: Optional[Scalar] = None,
                working_space: Optional[RGBWorkingSpace] = None) -> Self:
        """Build a neutral color with ``value`` in every channel."""
        return cls(value, value, value, alpha=alpha, working_space=working_space)  # type: ignore


class RGBTrueColor(_RGBChannels, ColorBase, RGBLike):
    __slots__ = ()
    kind:         ClassVar[ColorKind] = ColorKind.RGB_TRUE
    num_channels: ClassVar[int] = 3
    minima:       ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:       ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    alpha_max:    ClassVar[int] = 255
    integral:     ClassVar[bool] = True


class RGBDeepColor(_RGBChannels, ColorBase, RGBLike):
    __slots__ = ()
    kind:         ClassVar[ColorKind] = ColorKind.RGB_DEEP
    num_channels: ClassVar[int] = 3
    minima:       ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima:       ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    alpha_max:    ClassVar[float] = 1.0
