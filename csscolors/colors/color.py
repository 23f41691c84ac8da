from __future__ import annotations
from .color_base import ColorBase
from .hsl import hsl_space_to_class, HSL, HSLA
from .rgb import rgb_space_to_class, RGB, RGBA
from ..conversions import convert
from ..types.color_types import ColorSpace

unified_space_to_class: dict[str, type[ColorBase]] = {**rgb_space_to_class, **hsl_space_to_class}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Alpha is preserved between alpha spaces, dropped when converting to a
    space without alpha and set to 1.0 when converting from one.

    Args:
        to_space: Target color space ("rgb", "rgba", "hsl" or "hsla")

    Returns:
        New ColorBase instance in the target space
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    cls = get_color_class(to_space)
    if to_space == self.mode:
        return self

    result = convert(self.value, self.mode, to_space)
    return cls._from_stored(result)


def to_rgb(self: ColorBase) -> RGB:
    """Convert to RGB; any alpha channel is dropped."""
    return color_convert(self, "rgb")  # type: ignore


def to_rgba(self: ColorBase) -> RGBA:
    """Convert to RGBA; colors without alpha become fully opaque."""
    return color_convert(self, "rgba")  # type: ignore


def to_hsl(self: ColorBase) -> HSL:
    """Convert to HSL; any alpha channel is dropped."""
    return color_convert(self, "hsl")  # type: ignore


def to_hsla(self: ColorBase) -> HSLA:
    """Convert to HSLA; colors without alpha become fully opaque."""
    return color_convert(self, "hsla")  # type: ignore


def to_alpha_space(self: ColorBase) -> ColorBase:
    """Return the alpha variant of this color's model (RGB → RGBA, HSL → HSLA)."""
    return to_hsla(self) if self.has_hue else to_rgba(self)


def alpha_of(color: ColorBase) -> float:
    """Alpha of any color; colors without an alpha channel are opaque."""
    return color.value[3] if color.has_alpha else 1.0


ColorBase.convert = color_convert
ColorBase.to_rgb = to_rgb
ColorBase.to_rgba = to_rgba
ColorBase.to_hsl = to_hsl
ColorBase.to_hsla = to_hsla
