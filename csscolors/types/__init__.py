from .format_type import FormatType, max_non_hue, ALPHA_PRECISION, CSS_ALPHA_DECIMALS
from .color_types import ColorSpace, ScalarVector, HUE_SPACES, ALPHA_SPACES

__all__ = [
    "FormatType",
    "max_non_hue",
    "ALPHA_PRECISION",
    "CSS_ALPHA_DECIMALS",
    "ColorSpace",
    "ScalarVector",
    "HUE_SPACES",
    "ALPHA_SPACES",
]
