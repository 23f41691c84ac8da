from typing import Any, ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..units import Angle, Ratio
from .color_base import (
    ColorBase,
    WithAlpha,
    build_registry,
    coerce_hue,
    coerce_percentage,
    coerce_alpha,
)


class HSL(ColorBase):
    """
    HSL color. Hue is whole degrees in [0, 360); saturation and lightness are
    stored as 8-bit :class:`Ratio` values and read back as integer percentages.
    Two HSL colors are equal when their hue, percentages and alpha are equal,
    even if the stored bytes differ by the rounding of a percentage.
    """
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "hsl"
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")

    @classmethod
    def _coerce(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return (
            coerce_hue(value[0]),
            coerce_percentage("saturation", value[1]),
            coerce_percentage("lightness", value[2]),
        )

    @classmethod
    def _wrap_stored(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        h, s, l, *rest = value
        return (Angle(h), Ratio(s), Ratio(l), *rest)

    @property
    def hue(self) -> int:
        return int(self.value[0])

    @property
    def saturation(self) -> int:
        """Saturation as an integer percentage."""
        return self.value[1].as_percentage()

    @property
    def lightness(self) -> int:
        """Lightness as an integer percentage."""
        return self.value[2].as_percentage()

    def _fields(self) -> Tuple[Any, ...]:
        return (self.hue, self.saturation, self.lightness) + tuple(self.value[3:])

    def as_unit(self) -> Tuple[float, ...]:
        """Hue in degrees, saturation and lightness as floats in [0, 1]."""
        return (float(self.hue), self.value[1].as_unit(), self.value[2].as_unit()) + tuple(self.value[3:])


class HSLA(HSL, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "hsla"
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness", "alpha")

    @classmethod
    def _coerce(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return super()._coerce(value) + (coerce_alpha(value[3]),)


def hsl(h: int, s: int, l: int) -> HSL:
    """Create an HSL color: hue in [0, 360], saturation and lightness in percent."""
    return HSL((h, s, l))


def hsla(h: int, s: int, l: int, a: float) -> HSLA:
    """Create an HSLA color; ``a`` is the alpha in [0.0, 1.0]."""
    return HSLA((h, s, l, a))


hsl_space_to_class = build_registry(HSL, HSLA)
