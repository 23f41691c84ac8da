from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
HUE_SPACES = {"hsl", "hsla"}
ALPHA_SPACES = {"rgba", "hsla"}


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    if isinstance(element, ndarray):
        return element
    return np.array(element, dtype=float)
