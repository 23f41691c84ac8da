from __future__ import annotations
from numbers import Integral

from ..conversions.numbers import HUE_360


class Angle(int):
    """A hue angle in whole degrees, always normalized into ``[0, 360)``."""

    def __new__(cls, degrees: int):
        if isinstance(degrees, bool) or not isinstance(degrees, Integral):
            raise TypeError(f"Angle expects whole degrees, got {type(degrees).__name__}")
        return super().__new__(cls, int(degrees) % HUE_360)

    @property
    def degrees(self) -> int:
        return int(self)

    def __add__(self, other):
        if isinstance(other, Integral):
            return Angle(int(self) + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Integral):
            return Angle(int(self) - int(other))
        return NotImplemented

    def __neg__(self):
        return Angle(-int(self))

    def __repr__(self):
        return f"deg({int(self)})"


def deg(degrees: int) -> Angle:
    """Create an :class:`Angle`; any integer is accepted and wrapped modulo 360."""
    return Angle(degrees)
