"""
csscolors color space conversions
=================================

RGB <-> HSL conversion utilities with scalar, exact-integer and vectorized
(numpy) implementations.

Conversion Functions
--------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Exact: RGB bytes to (hue degrees, saturation byte, lightness byte)
    unit_rgb_to_hsl(r, g, b)
        Unit floats to (hue degrees, saturation, lightness)
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized unit conversion

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Exact: (hue degrees, saturation byte, lightness byte) to RGB bytes
    hsl_to_unit_rgb(h, s, l)
        Unit floats to RGB unit floats
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized unit conversion

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
    np_convert(color, from_space, to_space, input_type, output_type)

Rounding
--------
Channel values are always rounded half up, so conversions are stable
under round-tripping and independent of Python's banker's rounding.

Examples
--------
>>> from csscolors.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(127, 255, 0)
(90, 255, 128)
>>> hsl_to_rgb(90, 255, 128)
(128, 255, 1)
"""

from .css_to_hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    normalize_hue,
)
from .numbers import round_half_up, np_round_half_up
from .wrapper import convert, np_convert

from ..types.format_type import FormatType

__all__ = [
    'rgb_to_hsl',
    'hsl_to_rgb',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'np_unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',
    'normalize_hue',
    'round_half_up',
    'np_round_half_up',
    'convert',
    'np_convert',
    'FormatType',
]
