from typing import Any, ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry, coerce_byte, coerce_alpha


class RGB(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    @classmethod
    def _coerce(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return tuple(coerce_byte(name, v) for name, v in zip(cls.channel_names, value[:3]))

    @property
    def red(self) -> int:
        return self.value[0]

    @property
    def green(self) -> int:
        return self.value[1]

    @property
    def blue(self) -> int:
        return self.value[2]

    def as_unit(self) -> Tuple[float, ...]:
        """Channels as floats in [0, 1]."""
        return tuple(c / 255 for c in self.value[:3]) + tuple(self.value[3:])


class RGBA(RGB, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")

    @classmethod
    def _coerce(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return super()._coerce(value) + (coerce_alpha(value[3]),)


def rgb(r: int, g: int, b: int) -> RGB:
    """Create an opaque RGB color from channel bytes in [0, 255]."""
    return RGB((r, g, b))


def rgba(r: int, g: int, b: int, a: float) -> RGBA:
    """Create an RGBA color; ``a`` is the alpha in [0.0, 1.0]."""
    return RGBA((r, g, b, a))


rgb_space_to_class = build_registry(RGB, RGBA)
