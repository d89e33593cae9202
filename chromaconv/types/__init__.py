from .color_types import (
    ColorKind,
    KindLike,
    Scalar,
    ScalarVector,
    Triple,
)

__all__ = [
    "ColorKind",
    "KindLike",
    "Scalar",
    "ScalarVector",
    "Triple",
]
