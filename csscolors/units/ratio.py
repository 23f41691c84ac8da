from __future__ import annotations
from fractions import Fraction
from numbers import Integral, Real

from boundednumbers import clamp

from ..conversions.numbers import MAX_BYTE, round_half_up
from ..errors import ColorRangeError


class Ratio(int):
    """
    An 8-bit channel ratio, stored as an integer in ``[0, 255]``.

    HSL saturation and lightness are kept as ratios so that they share the
    resolution of RGB channels. Public accessors expose them as integer
    percentages through :meth:`as_percentage`.
    """

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"Ratio expects an integer byte, got {type(value).__name__}")
        if not 0 <= value <= MAX_BYTE:
            raise ColorRangeError("ratio", value, 0, MAX_BYTE)
        return super().__new__(cls, value)

    @classmethod
    def from_percentage(cls, percentage: Real) -> Ratio:
        """Build a ratio from a percentage in ``[0, 100]`` using exact arithmetic."""
        if not 0 <= percentage <= 100:
            raise ColorRangeError("percentage", percentage, 0, 100)
        return cls(round_half_up(Fraction(percentage) * MAX_BYTE / 100))

    @classmethod
    def from_unit(cls, value: Real) -> Ratio:
        """Build a ratio from a float in ``[0.0, 1.0]``."""
        if not 0.0 <= value <= 1.0:
            raise ColorRangeError("ratio", value, 0.0, 1.0)
        return cls(round_half_up(Fraction(value) * MAX_BYTE))

    def as_percentage(self) -> int:
        return round_half_up(Fraction(int(self) * 100, MAX_BYTE))

    def as_unit(self) -> float:
        return int(self) / MAX_BYTE

    def __add__(self, other):
        if isinstance(other, Ratio):
            return Ratio(int(clamp(int(self) + int(other), 0, MAX_BYTE)))
        return int(self) + other

    def __sub__(self, other):
        if isinstance(other, Ratio):
            return Ratio(int(clamp(int(self) - int(other), 0, MAX_BYTE)))
        return int(self) - other

    def __repr__(self):
        return f"Ratio({int(self)})"


class Percentage(float):
    """A percentage in ``[0, 100]`` used as the argument of color operations."""

    def __new__(cls, value: Real):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Percentage expects a real number, got {type(value).__name__}")
        if not 0 <= value <= 100:
            raise ColorRangeError("percentage", value, 0, 100)
        return super().__new__(cls, value)

    @property
    def fraction(self) -> Fraction:
        """The percentage as an exact fraction of one (``percent(50).fraction == 1/2``)."""
        return Fraction(float(self)) / 100

    def as_ratio(self) -> Ratio:
        return Ratio.from_percentage(float(self))

    def __repr__(self):
        value = float(self)
        return f"percent({int(value) if value.is_integer() else value})"


def percent(value: Real) -> Percentage:
    """Create a :class:`Percentage`; raises ``ColorRangeError`` outside ``[0, 100]``."""
    return Percentage(value)
