"""
csscolors color classes
=======================

Immutable color values for the RGB and HSL models, each with an alpha
variant:

    - RGB:  red, green, blue bytes (0-255)
    - RGBA: RGB plus alpha (0.0-1.0)
    - HSL:  hue (0-359 degrees), saturation and lightness (0-100%)
    - HSLA: HSL plus alpha (0.0-1.0)

Usage
-----
>>> from csscolors import rgb, hsl, percent
>>> tomato = rgb(255, 99, 71)
>>> tomato.to_hsl()
HSL(hue=9, saturation=100, lightness=64)
>>> hsl(90, 100, 50).darken(percent(20)).to_css()
'hsl(90, 100%, 30%)'

Notes
-----
- Instances are frozen after initialization; operations return new values.
- Out of range input raises ColorRangeError; nothing is clamped silently.
- Equality is model sensitive; convert before comparing across models.
- HSL saturation and lightness are stored with 1/255 resolution.
"""

from .color_base import ColorBase, WithAlpha
from .rgb import RGB, RGBA, rgb, rgba
from .hsl import HSL, HSLA, hsl, hsla
from .color import color_convert, get_color_class, unified_space_to_class
from .operations import (
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
)
from .css import to_css, to_hex, from_hex

__all__ = [
    'ColorBase',
    'WithAlpha',
    'RGB',
    'RGBA',
    'HSL',
    'HSLA',
    'rgb',
    'rgba',
    'hsl',
    'hsla',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
    'lighten',
    'darken',
    'saturate',
    'desaturate',
    'greyscale',
    'spin',
    'fadein',
    'fadeout',
    'fade',
    'mix',
    'tint',
    'shade',
    'to_css',
    'to_hex',
    'from_hex',
]
