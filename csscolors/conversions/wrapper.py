from typing import Tuple, Callable, Union, Optional

import numpy as np

from ..types.format_type import FormatType, max_non_hue, ALPHA_PRECISION
from ..types.color_types import ColorSpace, ScalarVector, element_to_array
from .css_to_hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
)
from .numbers import round_half_up, np_round_half_up

# Exact integer conversions, used when both ends are bytes
CONVERT_EXACT: dict[tuple[str, str], Callable[[int, int, int], Tuple[int, int, int]]] = {
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
}

CONVERT_UNIT: dict[tuple[str, str], Callable[[float, float, float], Tuple[float, float, float]]] = {
    ("rgb", "hsl"): unit_rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_unit_rgb,
}

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
}

DEFAULT_ALPHA = 1.0


def _split_space(space: str) -> Tuple[str, bool]:
    space = space.lower()
    if space not in ("rgb", "rgba", "hsl", "hsla"):
        raise ValueError(f"Unknown space: {space}")
    return space[:3], space.endswith("a")


def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    h = color[..., 0]
    a = color[..., 1] / maxval
    b = color[..., 2] / maxval
    return np.stack([h, a, b], axis=-1)


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = np.clip(color, 0.0, 1.0) * maxval
        return np_round_half_up(scaled) if fmt == FormatType.BYTE else scaled

    h = color[..., 0]
    a = np.clip(color[..., 1], 0.0, 1.0) * maxval
    b = np.clip(color[..., 2], 0.0, 1.0) * maxval

    if fmt == FormatType.BYTE:
        hue = np_round_half_up(h) % 360
        return np.stack([hue, np_round_half_up(a), np_round_half_up(b)], axis=-1)

    return np.stack([h, a, b], axis=-1)


def _convert_scalar_exact(color: ScalarVector, fs: str, ts: str) -> Tuple[int, int, int]:
    if fs == ts:
        return tuple(int(c) for c in color)
    return CONVERT_EXACT[(fs, ts)](*(int(c) for c in color))


def _convert_scalar_unit(
    color: ScalarVector, fs: str, ts: str, input_fmt: FormatType, output_fmt: FormatType
) -> Tuple[float, ...]:
    base_norm = normalize(element_to_array(color), fs, input_fmt)
    if fs == ts:
        converted = base_norm
    else:
        converted = np.array(CONVERT_UNIT[(fs, ts)](*(float(c) for c in base_norm)))
    out = scale(converted, ts, output_fmt)
    if output_fmt == FormatType.BYTE:
        return tuple(int(c) for c in out)
    return tuple(float(c) for c in out)


def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.BYTE,
    output_type: FormatType = FormatType.BYTE,
) -> ScalarVector:
    """
    Convert a single color tuple between color spaces and formats.

    RGB channels and HSL saturation/lightness are expressed in the chosen
    format (bytes 0-255, unit floats or percentages); hue is always in
    degrees and alpha is always a float in [0, 1]. Byte to byte conversions
    use exact rational arithmetic.

    Args:
        color: (c1, c2, c3) or (c1, c2, c3, alpha)
        from_space: "rgb", "rgba", "hsl" or "hsla"
        to_space: Target space
        input_type: Format of the input channels
        output_type: Format of the output channels

    Returns:
        Converted tuple. Alpha is dropped when the target has none and set to
        1.0 when the source has none.
    """
    fs, has_alpha_in = _split_space(from_space)
    ts, has_alpha_out = _split_space(to_space)
    input_type, output_type = FormatType(input_type), FormatType(output_type)

    alpha: Optional[float] = None
    if has_alpha_in:
        *base, alpha = color
    else:
        base = color

    if input_type == FormatType.BYTE and output_type == FormatType.BYTE:
        out = _convert_scalar_exact(base, fs, ts)
    else:
        out = _convert_scalar_unit(base, fs, ts, input_type, output_type)

    if has_alpha_out:
        alpha = DEFAULT_ALPHA if alpha is None else alpha
        return out + (round(float(alpha), ALPHA_PRECISION),)
    return out


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    fs, has_alpha_in = _split_space(from_space)
    ts, has_alpha_out = _split_space(to_space)

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    # normalize → convert → scale
    base_norm = normalize(base, fs, input_fmt)

    if fs == ts:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(fs, ts)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    out = scale(converted, ts, output_fmt)

    if has_alpha_out:
        if alpha is None:
            alpha = np.full(out.shape[:-1], DEFAULT_ALPHA)
        out = out.astype(float)
        return np.concatenate([out, np.asarray(alpha, dtype=float)[..., None]], axis=-1)

    return out


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: Union[FormatType, str] = FormatType.BYTE,
    output_type: Union[FormatType, str] = FormatType.BYTE,
) -> np.ndarray:
    """
    Vectorized :func:`convert` for arrays of shape (..., 3) or (..., 4).

    Uses the floating point algorithm; byte outputs are rounded half up.
    Arrays carrying alpha are returned as floats.
    """
    color = np.asarray(color, dtype=float)
    expected = 4 if from_space.lower().endswith("a") else 3
    if color.shape[-1] != expected:
        raise ValueError(
            f"{from_space} expects last dimension to be {expected}, got shape {color.shape}"
        )
    return _convert_core(
        color,
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
