from __future__ import annotations
from typing import Callable, Optional

from .color_base import ColorBase, build_registry
from .rgb import RGBTrueColor, RGBDeepColor
from .grey import GreyTrueColor, GreyDeepColor
from .cmyk import CMYK
from .hsv import HSV
from .hsl import HSL
from .xyz import XYZ
from .lab import Lab
from ..exceptions import UnsupportedConversion
from ..spaces.reference_white import ReferenceWhite
from ..types.color_types import ColorKind, KindLike

kind_to_class: dict[ColorKind, type[ColorBase]] = build_registry(
    RGBTrueColor,
    RGBDeepColor,
    GreyTrueColor,
    GreyDeepColor,
    CMYK,
    HSV,
    HSL,
    XYZ,
    Lab,
)


def color_convert(self: ColorBase, target_kind: KindLike,
                  reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    """
    Convert this color to another kind.

    Args:
        target_kind: Target kind (e.g. ``ColorKind.LAB`` or ``"lab"``)
        reference_white: White for the XYZ <-> L*a*b* edges. Defaults to D65 / 2°.

    Returns:
        New color value of the target kind (``self`` when the kinds match)
    """
    # local import to avoid cycles
    from ..conversions.wrapper import convert
    return convert(self, target_kind, reference_white)


def _to_kind(kind: ColorKind) -> Callable[..., ColorBase]:
    def method(self: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
        return color_convert(self, kind, reference_white)

    method.__name__ = f"to_{kind.value}"
    method.__doc__ = f"Shorthand for ``convert(ColorKind.{kind.name}, reference_white)``."
    return method


ColorBase.convert = color_convert
for _kind in ColorKind:
    setattr(ColorBase, f"to_{_kind.value}", _to_kind(_kind))


def get_color_class(kind: KindLike) -> type[ColorBase]:
    if isinstance(kind, str) and not isinstance(kind, ColorKind):
        kind = kind.lower()
    try:
        return kind_to_class[ColorKind(kind)]
    except ValueError as exc:
        raise UnsupportedConversion(f"Unsupported color kind: {kind!r}") from exc
