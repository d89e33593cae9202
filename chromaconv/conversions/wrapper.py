"""
Conversion dispatch.

``convert`` switches on the source kind to one of the ``from_<kind>``
functions, each of which switches on the target kind. Edges without a direct
formula are composed through a hub: RGB_DEEP in general, XYZ for anything
leaving L*a*b*. Every result is a new value carrying the source's working
space and its alpha rescaled to the target kind's alpha range.
"""

import logging
from typing import Callable, Dict, Optional, Sequence

from ..colors.color_base import ColorBase
from ..colors.rgb import RGBTrueColor, RGBDeepColor
from ..colors.grey import GreyTrueColor, GreyDeepColor
from ..colors.cmyk import CMYK
from ..colors.hsv import HSV
from ..colors.hsl import HSL
from ..colors.xyz import XYZ
from ..colors.lab import Lab
from ..exceptions import UnsupportedConversion
from ..spaces.reference_white import DEFAULT_REFERENCE_WHITE, ReferenceWhite
from ..types.color_types import ColorKind, KindLike, Scalar
from ..utils.default import value_or_default

from .to_rgb import (
    rgb_true_to_rgb_deep,
    rgb_deep_to_rgb_true,
    grey_to_rgb,
    cmyk_to_rgb_deep,
    hsv_to_rgb_deep,
    hsl_to_rgb_deep,
    xyz_to_rgb_deep,
)
from .to_grey import (
    rgb_true_to_grey_true,
    rgb_deep_to_grey_deep,
    grey_true_to_grey_deep,
    grey_deep_to_grey_true,
)
from .to_cmyk import rgb_deep_to_cmyk
from .to_hsv import rgb_deep_to_hsv, hsl_to_hsv
from .to_hsl import hsv_to_hsl, rgb_deep_to_hsl
from .to_xyz import rgb_deep_to_xyz, lab_to_xyz
from .to_lab import xyz_to_lab

logger = logging.getLogger(__name__)

Converter = Callable[[ColorBase, ColorKind, Optional[ReferenceWhite]], ColorBase]


def _build(cls: type[ColorBase], components: Sequence[Scalar], source: ColorBase) -> ColorBase:
    """Wrap converted components, carrying the source's alpha and working space."""
    return cls(
        *components,
        alpha=source.normalized_alpha * cls.alpha_max,
        working_space=source.working_space,
    )


def normalize_kind(kind: KindLike) -> ColorKind:
    """
    Coerce a ``ColorKind`` or its string value (case-insensitive) to ``ColorKind``.

    Raises:
        UnsupportedConversion: If the kind is not one of the nine supported kinds.
    """
    if isinstance(kind, str) and not isinstance(kind, ColorKind):
        kind = kind.lower()
    try:
        return ColorKind(kind)
    except ValueError as exc:
        raise UnsupportedConversion(
            f"Unsupported color kind {kind!r}; expected one of {[k.value for k in ColorKind]}"
        ) from exc


# ------------------ per-source dispatch ------------------
def from_rgb_true(value: RGBTrueColor, target_kind: ColorKind,
                  reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.RGB_TRUE:
        return value
    if target_kind == ColorKind.RGB_DEEP:
        return _build(RGBDeepColor, rgb_true_to_rgb_deep(*value), value)
    if target_kind == ColorKind.GREY_TRUE:
        return _build(GreyTrueColor, (rgb_true_to_grey_true(*value),), value)
    if target_kind == ColorKind.GREY_DEEP:
        grey = from_rgb_true(value, ColorKind.GREY_TRUE)
        return from_grey_true(grey, target_kind)
    return from_rgb_deep(from_rgb_true(value, ColorKind.RGB_DEEP), target_kind, reference_white)


def from_rgb_deep(value: RGBDeepColor, target_kind: ColorKind,
                  reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.RGB_DEEP:
        return value
    if target_kind == ColorKind.RGB_TRUE:
        return _build(RGBTrueColor, rgb_deep_to_rgb_true(*value), value)
    if target_kind == ColorKind.GREY_DEEP:
        return _build(GreyDeepColor, (rgb_deep_to_grey_deep(*value),), value)
    if target_kind == ColorKind.GREY_TRUE:
        return from_rgb_true(from_rgb_deep(value, ColorKind.RGB_TRUE), target_kind)
    if target_kind == ColorKind.CMYK:
        return _build(CMYK, rgb_deep_to_cmyk(*value), value)
    if target_kind == ColorKind.HSV:
        return _build(HSV, rgb_deep_to_hsv(*value), value)
    if target_kind == ColorKind.HSL:
        return _build(HSL, rgb_deep_to_hsl(*value), value)
    if target_kind == ColorKind.XYZ:
        return _build(XYZ, rgb_deep_to_xyz(*value, working_space=value.working_space), value)
    if target_kind == ColorKind.LAB:
        return from_xyz(from_rgb_deep(value, ColorKind.XYZ), target_kind, reference_white)
    raise UnsupportedConversion(f"No conversion from {value.kind.value} to {target_kind!r}")


def from_grey_true(value: GreyTrueColor, target_kind: ColorKind,
                   reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.GREY_TRUE:
        return value
    if target_kind == ColorKind.GREY_DEEP:
        return _build(GreyDeepColor, (grey_true_to_grey_deep(value.grey),), value)
    rgb = _build(RGBTrueColor, grey_to_rgb(value.grey), value)
    return from_rgb_true(rgb, target_kind, reference_white)


def from_grey_deep(value: GreyDeepColor, target_kind: ColorKind,
                   reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.GREY_DEEP:
        return value
    if target_kind == ColorKind.GREY_TRUE:
        return _build(GreyTrueColor, (grey_deep_to_grey_true(value.grey),), value)
    rgb = _build(RGBDeepColor, grey_to_rgb(value.grey), value)
    return from_rgb_deep(rgb, target_kind, reference_white)


def from_cmyk(value: CMYK, target_kind: ColorKind,
              reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.CMYK:
        return value
    rgb = _build(RGBDeepColor, cmyk_to_rgb_deep(*value), value)
    return from_rgb_deep(rgb, target_kind, reference_white)


def from_hsv(value: HSV, target_kind: ColorKind,
             reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.HSV:
        return value
    if target_kind == ColorKind.HSL:
        return _build(HSL, hsv_to_hsl(*value), value)
    rgb = _build(RGBDeepColor, hsv_to_rgb_deep(*value), value)
    return from_rgb_deep(rgb, target_kind, reference_white)


def from_hsl(value: HSL, target_kind: ColorKind,
             reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.HSL:
        return value
    if target_kind == ColorKind.HSV:
        return _build(HSV, hsl_to_hsv(*value), value)
    rgb = _build(RGBDeepColor, hsl_to_rgb_deep(*value), value)
    return from_rgb_deep(rgb, target_kind, reference_white)


def from_xyz(value: XYZ, target_kind: ColorKind,
             reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.XYZ:
        return value
    if target_kind == ColorKind.LAB:
        white = value_or_default(reference_white, DEFAULT_REFERENCE_WHITE)
        return _build(Lab, xyz_to_lab(*value, reference_white=white), value)
    rgb_components = xyz_to_rgb_deep(*value, working_space=value.working_space)
    rgb = _build(RGBDeepColor, rgb_components, value)
    return from_rgb_deep(rgb, target_kind, reference_white)


def from_lab(value: Lab, target_kind: ColorKind,
             reference_white: Optional[ReferenceWhite] = None) -> ColorBase:
    if target_kind == ColorKind.LAB:
        return value
    white = value_or_default(reference_white, DEFAULT_REFERENCE_WHITE)
    xyz = _build(XYZ, lab_to_xyz(*value, reference_white=white), value)
    return from_xyz(xyz, target_kind, reference_white)


CONVERTERS: Dict[ColorKind, Converter] = {
    ColorKind.RGB_TRUE: from_rgb_true,  # type: ignore[dict-item]
    ColorKind.RGB_DEEP: from_rgb_deep,  # type: ignore[dict-item]
    ColorKind.GREY_TRUE: from_grey_true,  # type: ignore[dict-item]
    ColorKind.GREY_DEEP: from_grey_deep,  # type: ignore[dict-item]
    ColorKind.CMYK: from_cmyk,  # type: ignore[dict-item]
    ColorKind.HSV: from_hsv,  # type: ignore[dict-item]
    ColorKind.HSL: from_hsl,  # type: ignore[dict-item]
    ColorKind.XYZ: from_xyz,  # type: ignore[dict-item]
    ColorKind.LAB: from_lab,  # type: ignore[dict-item]
}


def convert(
    value: ColorBase,
    target_kind: KindLike,
    reference_white: Optional[ReferenceWhite] = None,
) -> ColorBase:
    """
    Convert ``value`` to ``target_kind``.

    Args:
        value: Any color value
        target_kind: A ``ColorKind`` or its string value, e.g. ``"lab"``
        reference_white: White used on the XYZ <-> L*a*b* edges (default D65 / 2°)

    Returns:
        A new color of the target kind, or ``value`` itself when the kinds match.

    Raises:
        UnsupportedConversion: If either kind is not supported.
    """
    target = normalize_kind(target_kind)
    if not isinstance(value, ColorBase):
        raise UnsupportedConversion(f"Cannot convert {type(value).__name__} values")
    converter = CONVERTERS.get(value.kind)
    if converter is None:
        raise UnsupportedConversion(f"Unsupported source kind {value.kind!r}")

    logger.debug("Converting %s -> %s", value.kind.value, target.value)
    return converter(value, target, reference_white)


def to_rgb_true(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> RGBTrueColor:
    return convert(value, ColorKind.RGB_TRUE, reference_white)  # type: ignore[return-value]


def to_rgb_deep(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> RGBDeepColor:
    return convert(value, ColorKind.RGB_DEEP, reference_white)  # type: ignore[return-value]


def to_grey_true(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> GreyTrueColor:
    return convert(value, ColorKind.GREY_TRUE, reference_white)  # type: ignore[return-value]


def to_grey_deep(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> GreyDeepColor:
    return convert(value, ColorKind.GREY_DEEP, reference_white)  # type: ignore[return-value]


def to_cmyk(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> CMYK:
    return convert(value, ColorKind.CMYK, reference_white)  # type: ignore[return-value]


def to_hsv(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> HSV:
    return convert(value, ColorKind.HSV, reference_white)  # type: ignore[return-value]


def to_hsl(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> HSL:
    return convert(value, ColorKind.HSL, reference_white)  # type: ignore[return-value]


def to_xyz(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> XYZ:
    return convert(value, ColorKind.XYZ, reference_white)  # type: ignore[return-value]


def to_lab(value: ColorBase, reference_white: Optional[ReferenceWhite] = None) -> Lab:
    return convert(value, ColorKind.LAB, reference_white)  # type: ignore[return-value]
