"""Domain constants for personal finance metrics."""

from decimal import Decimal

from src.domain.models.ledger import AssetCategory, Frequency

# Number of periods per year for each frequency.
PERIODS_PER_YEAR = {
    Frequency.MONTHLY: Decimal("12"),
    Frequency.WEEKLY: Decimal("52"),
    Frequency.BI_WEEKLY: Decimal("26"),
    Frequency.QUARTERLY: Decimal("4"),
    Frequency.ANNUALLY: Decimal("1"),
}

MONTHS_PER_YEAR = Decimal("12")

LIQUID_ASSET_CATEGORIES = (
    AssetCategory.LIQUID,
    AssetCategory.INVESTMENT,
)

DEFAULT_EMERGENCY_FUND_MULTIPLIER = Decimal("3")

# 50 years; guarantees termination of goal-seeking loops.
DEFAULT_MAX_PROJECTION_MONTHS = 600

# Plan projections stop after three years even when the goal is further out.
EMERGENCY_FUND_PROJECTION_MONTHS = 36

DEFAULT_ANNUAL_RETURN_PERCENT = Decimal("7")

RECOMMENDED_NEEDS_PERCENT = 50
RECOMMENDED_WANTS_PERCENT = 30
RECOMMENDED_SAVINGS_PERCENT = 20

UNCATEGORIZED = "Uncategorized"


__all__ = [
    "PERIODS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "LIQUID_ASSET_CATEGORIES",
    "DEFAULT_EMERGENCY_FUND_MULTIPLIER",
    "DEFAULT_MAX_PROJECTION_MONTHS",
    "EMERGENCY_FUND_PROJECTION_MONTHS",
    "DEFAULT_ANNUAL_RETURN_PERCENT",
    "RECOMMENDED_NEEDS_PERCENT",
    "RECOMMENDED_WANTS_PERCENT",
    "RECOMMENDED_SAVINGS_PERCENT",
    "UNCATEGORIZED",
]
