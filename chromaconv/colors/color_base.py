from __future__ import annotations
import math
from abc import ABC
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, Self

from boundednumbers.functions import clamp

from ..exceptions import InvalidArgument, OutOfRange
from ..spaces.working_space import RGBWorkingSpace, SRGB
from ..types.color_types import ColorKind, Scalar, ScalarVector
from ..utils.num_utils import round_to_int


class channel:
    """Read-only accessor for one component of a color value."""

    def __init__(self, index: int, doc: str = ""):
        self.index = index
        self.__doc__ = doc

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._components[self.index]

    def __set__(self, instance, value):
        raise AttributeError(
            f"{instance.__class__.__name__} is immutable; use replace({self.name}=...) instead"
        )


class ColorBase:
    __slots__ = ('_components', '_alpha', '_working_space', '_is_frozen')

    kind:          ClassVar[ColorKind]
    num_channels:  ClassVar[int]
    channel_names: ClassVar[Tuple[str, ...]]
    minima:        ClassVar[ScalarVector]
    maxima:        ClassVar[ScalarVector]
    alpha_max:     ClassVar[Scalar] = 1.0
    integral:      ClassVar[bool] = False

    # bound in color.py
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        *components: Scalar,
        alpha: Optional[Scalar] = None,
        working_space: Optional[RGBWorkingSpace] = None,
    ) -> None:
        if len(components) != self.num_channels:
            raise InvalidArgument(
                f"{self.__class__.__name__} expects {self.num_channels} components "
                f"{self.channel_names}, got {len(components)}"
            )

        self._components = tuple(
            self._clamp_component(v, lo, hi)
            for v, lo, hi in zip(components, self.minima, self.maxima)
        )
        self._alpha = self._clamp_component(
            self.alpha_max if alpha is None else alpha, 0, self.alpha_max
        )
        self._working_space = working_space if working_space is not None else SRGB

        # no more writes after this point
        super().__setattr__('_is_frozen', True)

    def _clamp_component(self, value: Scalar, lo: Scalar, hi: Scalar) -> Scalar:
        value = float(value)
        if math.isnan(value):
            raise InvalidArgument(f"{self.__class__.__name__} components must not be NaN")
        value = clamp(value, lo, hi)
        if self.integral:
            return round_to_int(value)
        return float(value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def components(self) -> ScalarVector:
        return self._components

    @property
    def alpha(self) -> Scalar:
        return self._alpha

    @property
    def normalized_alpha(self) -> float:
        """Alpha scaled to [0, 1] regardless of the kind's alpha range."""
        return self._alpha / self.alpha_max

    @property
    def working_space(self) -> RGBWorkingSpace:
        return self._working_space

    @property
    def component_min(self) -> ScalarVector:
        return self.minima

    @property
    def component_max(self) -> ScalarVector:
        return self.maxima

    def get_component(self, index: int) -> Scalar:
        self._check_index(index)
        return self._components[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.num_channels:
            raise OutOfRange(
                f"Component index {index} out of range for {self.__class__.__name__} "
                f"({self.num_channels} components)"
            )

    # ------------------ DERIVED VALUES ------------------
    def _rebuild(self, components: ScalarVector, alpha: Optional[Scalar] = None,
                 working_space: Optional[RGBWorkingSpace] = None) -> Self:
        return self.__class__(
            *components,
            alpha=self._alpha if alpha is None else alpha,
            working_space=working_space or self._working_space,
        )

    def with_component(self, index: int, value: Scalar) -> Self:
        self._check_index(index)
        components = list(self._components)
        components[index] = value
        return self._rebuild(components)

    def replace(self, **channels: Scalar) -> Self:
        """
        Return a copy with the named channels replaced (and clamped).

        >>> CMYK(0.1, 0.2, 0.3, 0.4).replace(cyan=2.0).cyan
        1.0
        """
        unknown = set(channels) - set(self.channel_names)
        if unknown:
            raise InvalidArgument(
                f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}; "
                f"expected {self.channel_names}"
            )
        components = tuple(
            channels.get(name, value) for name, value in zip(self.channel_names, self._components)
        )
        return self._rebuild(components)

    def with_alpha(self, alpha: Scalar) -> Self:
        return self._rebuild(self._components, alpha=alpha)

    def with_working_space(self, working_space: RGBWorkingSpace) -> Self:
        return self._rebuild(self._components, working_space=working_space)

    @classmethod
    def from_color(cls, other: ColorBase) -> Self:
        """
        Build this representation from a generic color value of the same kind.

        This is a typed copy, not a conversion: use ``convert`` to change kinds.

        Raises:
            InvalidArgument: If ``other`` is of a different kind or channel count.
        """
        if not isinstance(other, ColorBase):
            raise InvalidArgument(f"Cannot build {cls.__name__} from {type(other).__name__}")
        if other.kind != cls.kind or len(other.components) != cls.num_channels:
            raise InvalidArgument(
                f"Cannot build {cls.__name__} from a {other.kind.value} value; "
                f"use convert() to change representation"
            )
        return cls(*other.components, alpha=other.alpha, working_space=other.working_space)

    # ------------------ OPERATORS ------------------
    def __eq__(self, other: object) -> bool:
        """Same kind, same channel count, pointwise-equal components. Alpha is ignored."""
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.kind == other.kind
            and len(self._components) == len(other._components)
            and self._components == other._components
        )

    def __hash__(self) -> int:
        return hash((self.kind, self._components))

    def equals_with_alpha(self, other: ColorBase) -> bool:
        return self == other and self._alpha == other._alpha

    def __add__(self, other: Any) -> Self:
        """Component-wise sum, clamped to this kind's bounds; keeps the left operand's alpha."""
        if not isinstance(other, ColorBase):
            return NotImplemented
        if self.kind != other.kind or len(self._components) != len(other._components):
            raise InvalidArgument(
                f"Cannot add {other.kind.value} to {self.kind.value}: the colors have different types"
            )
        return self._rebuild(tuple(a + b for a, b in zip(self._components, other._components)))

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._components)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in zip(self.channel_names, self._components))
        return f"{self.__class__.__name__}({values}, alpha={self._alpha!r})"


class RGBLike(ABC):
    """
    Mixin for the RGB and grey kinds: alpha premultiplication and gamma
    correction through the attached working space.

    Assumes every channel shares the same [0, maxima[0]] range.
    """

    __slots__ = ()

    maxima: ClassVar[ScalarVector]
    alpha_max: ClassVar[Scalar]
    components: ScalarVector
    normalized_alpha: float
    working_space: RGBWorkingSpace
    _rebuild: Callable[..., Any]

    def alpha_multiply(self) -> Self:
        """Scale every component by alpha (premultiply)."""
        a = self.normalized_alpha
        return self._rebuild(tuple(v * a for v in self.components))

    def alpha_divide(self) -> Self:
        """Undo ``alpha_multiply``; a fully transparent color is returned unchanged."""
        a = self.normalized_alpha
        if a == 0:
            return self
        return self._rebuild(tuple(v / a for v in self.components))

    def gamma_correction(self) -> Self:
        """Linear-light components -> encoded components."""
        return self._apply_curve(self.working_space.gamma_curve.gamma_correction)

    def inverse_gamma_correction(self) -> Self:
        """Encoded components -> linear-light components."""
        return self._apply_curve(self.working_space.gamma_curve.inverse_gamma_correction)

    def _apply_curve(self, curve: Callable[[float], float]) -> Self:
        top = self.maxima[0]
        return self._rebuild(tuple(curve(v / top) * top for v in self.components))


def build_registry(*classes: type[ColorBase]) -> dict[ColorKind, type[ColorBase]]:
    return {cls.kind: cls for cls in classes}
