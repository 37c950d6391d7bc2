"""Budget allocation guideline."""

from src.domain.constants import (
    RECOMMENDED_NEEDS_PERCENT,
    RECOMMENDED_SAVINGS_PERCENT,
    RECOMMENDED_WANTS_PERCENT,
)
from src.domain.models.finance import AllocationSplit

# Fixed 50/30/20 rule; not derived from ledger data.
RECOMMENDED_ALLOCATION = AllocationSplit(
    needs=RECOMMENDED_NEEDS_PERCENT,
    wants=RECOMMENDED_WANTS_PERCENT,
    savings=RECOMMENDED_SAVINGS_PERCENT,
)


__all__ = ["RECOMMENDED_ALLOCATION"]
