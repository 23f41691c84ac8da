from fractions import Fraction
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .numbers import MAX_BYTE, HUE_360, round_half_up

ByteTriple = Tuple[int, int, int]


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360

## HSL to RGB conversions

def _sector_triple(sector: int, c, x):
    """(r, g, b) before the lightness offset, for a 60 degree hue sector."""
    if sector == 0:
        return c, x, 0
    elif sector == 1:
        return x, c, 0
    elif sector == 2:
        return 0, c, x
    elif sector == 3:
        return 0, x, c
    elif sector == 4:
        return x, 0, c
    return c, 0, x


def hsl_to_rgb(h: int, s: int, l: int) -> ByteTriple:
    """
    Convert integer HSL to RGB bytes with exact rational arithmetic.

    Args:
        h: Hue in whole degrees, any integer (wrapped into [0, 360))
        s: Saturation as a byte in [0, 255]
        l: Lightness as a byte in [0, 255]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h = int(h) % HUE_360
    # Everything below is already multiplied by 255.
    chroma = Fraction((MAX_BYTE - abs(2 * l - MAX_BYTE)) * s, MAX_BYTE)
    offset = h % 120
    x = chroma * Fraction(60 - abs(offset - 60), 60)
    m = l - chroma / 2

    r, g, b = _sector_triple(h // 60, chroma, x)
    return tuple(
        min(MAX_BYTE, max(0, round_half_up(channel + m))) for channel in (r, g, b)
    )


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB using the chroma / hue-sector reconstruction.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    r, g, b = _sector_triple(int(h // 60), chroma, x)
    return r + m, g + m, b + m


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    x = chroma * (1 - np.abs((h / 60) % 2 - 1))
    m = l - chroma / 2
    zero = np.zeros(out_shape)

    sector = np.floor(h / 60).astype(int)
    conditions = [sector == i for i in range(6)]

    r = np.select(conditions, [chroma, x, zero, zero, x, chroma])
    g = np.select(conditions, [x, chroma, chroma, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, chroma, chroma, x])

    return np.stack([r + m, g + m, b + m], axis=-1)

## RGB to HSL conversions

def rgb_to_hsl(r: int, g: int, b: int) -> ByteTriple:
    """
    Convert RGB bytes to integer HSL with exact rational arithmetic.

    Achromatic input (r == g == b) yields hue 0 and saturation 0.

    Returns:
        Tuple[int, int, int]: (hue in [0, 360), saturation byte, lightness byte)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = round_half_up(Fraction(max_c + min_c, 2))
    if delta == 0:
        return 0, 0, lightness

    saturation = round_half_up(
        Fraction(MAX_BYTE * delta, MAX_BYTE - abs(max_c + min_c - MAX_BYTE))
    )

    if max_c == r:
        hue = Fraction(60 * (g - b), delta) % HUE_360
    elif max_c == g:
        hue = Fraction(60 * (b - r), delta) + 120
    else:
        hue = Fraction(60 * (r - g), delta) + 240

    return round_half_up(hue) % HUE_360, min(saturation, MAX_BYTE), lightness


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = min(1.0, delta / (1 - abs(2 * lightness - 1)))

    if max_c == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    return normalize_hue(hue), saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape)
    mask = delta > 0
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))
    saturation = np.minimum(saturation, 1.0)

    # Red wins ties, then green, matching the scalar branch order
    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60 * (((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6)
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2)
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4)

    return np.stack([hue % HUE_360, saturation, lightness], axis=-1)
