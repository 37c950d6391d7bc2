"""Domain policies package."""

from .allocation import RECOMMENDED_ALLOCATION
from .zero_denominator import ZeroDenominatorPolicy

__all__ = ["RECOMMENDED_ALLOCATION", "ZeroDenominatorPolicy"]
