"""Rounding helpers and numeric constants shared by the conversion code.

Every value handled here is non-negative, so rounding half up is the same
as rounding half away from zero. Python's built-in ``round`` rounds half to
even and is never used for channel values.
"""
import math
from fractions import Fraction
from numbers import Integral, Real
from typing import Union

import numpy as np

MAX_BYTE = 255
HUE_360 = 360


def round_half_up(value: Union[Real, Fraction]) -> int:
    """Round a non-negative number to the nearest integer, halves going up."""
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Fraction):
        return math.floor(value + Fraction(1, 2))
    return math.floor(float(value) + 0.5)


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`round_half_up`, returning an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)
