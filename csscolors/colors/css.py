from __future__ import annotations
import re

from ..errors import ColorFormatError
from ..types.format_type import CSS_ALPHA_DECIMALS
from ..conversions.numbers import round_half_up
from .color_base import ColorBase
from .color import to_rgb
from .rgb import RGB, RGBA

_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def _format_alpha(alpha: float) -> str:
    return f"{alpha:.{CSS_ALPHA_DECIMALS}f}"


def to_css(self: ColorBase) -> str:
    """
    Render the color as CSS text.

    RGB channels are integers, HSL saturation and lightness are integer
    percentages and alpha has exactly two decimals:
    ``rgb(255, 99, 71)``, ``rgba(255, 99, 71, 0.50)``,
    ``hsl(9, 100%, 64%)``, ``hsla(9, 100%, 64%, 0.50)``.
    """
    if self.has_hue:
        body = f"{self.hue}, {self.saturation}%, {self.lightness}%"  # type: ignore[attr-defined]
    else:
        body = ", ".join(str(c) for c in self.value[:3])

    if self.has_alpha:
        return f"{self.mode}({body}, {_format_alpha(self.value[3])})"
    return f"{self.mode}({body})"


def to_hex(self: ColorBase) -> str:
    """``#rrggbb``, or ``#rrggbbaa`` for colors with alpha. Always lowercase."""
    r, g, b = to_rgb(self).value
    digits = f"#{r:02x}{g:02x}{b:02x}"
    if self.has_alpha:
        digits += f"{round_half_up(self.value[3] * 255):02x}"
    return digits


def from_hex(text: str) -> ColorBase:
    """
    Read a color written as ``#rrggbb`` (RGB) or ``#rrggbbaa`` (RGBA).

    This is the inverse of :func:`to_hex`, not a general CSS parser: short
    forms, names and functional notation are rejected.

    Raises:
        ColorFormatError: If ``text`` is not in one of the two hex forms.
    """
    if not isinstance(text, str):
        raise ColorFormatError(f"expected a hex string, got {type(text).__name__}")
    match = _HEX_PATTERN.fullmatch(text)
    if match is None:
        raise ColorFormatError(
            f"expected a string in the format #rrggbb or #rrggbbaa, got {text!r}", text
        )

    digits = match.group(1)
    channels = tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))
    if len(channels) == 3:
        return RGB(channels)
    return RGBA(channels[:3] + (channels[3] / 255,))


ColorBase.to_css = to_css
ColorBase.to_hex = to_hex
ColorBase.__str__ = to_css
