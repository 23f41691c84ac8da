# No dependencies
from enum import Enum


class FormatType(str, Enum):
    BYTE = "byte"
    UNIT = "unit"
    PERCENTAGE = "percentage"


max_non_hue = {
    FormatType.BYTE: 255,
    FormatType.UNIT: 1.0,
    FormatType.PERCENTAGE: 100.0,
}

# Alpha is always a unit float; it is stored rounded to this many places
ALPHA_PRECISION = 6
CSS_ALPHA_DECIMALS = 2
