"""
Exceptions raised by csscolors.

Exception Hierarchy:
    ColorError (base, a ValueError)
    ├── ColorRangeError
    └── ColorFormatError
"""
from __future__ import annotations
from typing import Any, Optional


class ColorError(ValueError):
    """Base exception for all csscolors errors."""
    pass


class ColorRangeError(ColorError):
    """
    Raised when a channel, percentage, hue or alpha is outside its domain.

    Attributes:
        field: Name of the offending field (e.g. "red", "alpha")
        value: The rejected value
        lower: Inclusive lower bound
        upper: Inclusive upper bound
    """

    def __init__(self, field: str, value: Any, lower: Any, upper: Any, message: Optional[str] = None):
        if message is None:
            message = f"{field} must be between {lower} and {upper}, got {value!r}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper


class ColorFormatError(ColorError):
    """Raised when a hex color string is malformed."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text
