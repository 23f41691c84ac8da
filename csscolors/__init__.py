"""csscolors: CSS color values with Less-style color operations."""

from .colors import (
    ColorBase,
    RGB,
    RGBA,
    HSL,
    HSLA,
    rgb,
    rgba,
    hsl,
    hsla,
    color_convert,
    lighten,
    darken,
    saturate,
    desaturate,
    greyscale,
    spin,
    fadein,
    fadeout,
    fade,
    mix,
    tint,
    shade,
    from_hex,
)
from .units import Ratio, Percentage, percent, Angle, deg
from .errors import ColorError, ColorRangeError, ColorFormatError
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    convert,
    np_convert,
    FormatType,
)

__version__ = "0.1.0"

__all__ = [
    # core color types
    "ColorBase",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "color_convert",
    "from_hex",
    # operations
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "greyscale",
    "spin",
    "fadein",
    "fadeout",
    "fade",
    "mix",
    "tint",
    "shade",
    # units
    "Ratio",
    "Percentage",
    "percent",
    "Angle",
    "deg",
    # errors
    "ColorError",
    "ColorRangeError",
    "ColorFormatError",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_hsl_to_unit_rgb",
    "convert",
    "np_convert",
    "FormatType",
]
