from .ratio import Ratio, Percentage, percent
from .angle import Angle, deg

__all__ = ["Ratio", "Percentage", "percent", "Angle", "deg"]
