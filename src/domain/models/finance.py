"""Domain models for derived financial metrics."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.ledger import Debt


@dataclass(frozen=True)
class ExpenseSplit:
    """Monthly burn split between essential and discretionary spending."""

    essential: Decimal
    discretionary: Decimal

    @property
    def total(self) -> Decimal:
        """Return the combined monthly spending."""
        return self.essential + self.discretionary


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class EmergencyFundProgress:
    """Progress toward the emergency fund ("3X") goal.

    Attributes:
        current: Liquid assets available today.
        target: Goal amount (annual burn times the multiplier).
        percent_complete: current / target as a percentage.
        shortfall: Amount still missing, never negative.
    """

    current: Decimal
    target: Decimal
    percent_complete: Decimal
    shortfall: Decimal

    @property
    def is_funded(self) -> bool:
        """Return True when the goal has been met."""
        return self.current >= self.target


@dataclass(frozen=True)
class AllocationSplit:
    """Needs/wants/savings split in whole percentages."""

    needs: int
    wants: int
    savings: int

    @property
    def total(self) -> int:
        """Return the sum of the three buckets."""
        return self.needs + self.wants + self.savings


@dataclass(frozen=True)
class AllocationAmounts:
    """Monthly dollar amounts for each allocation bucket."""

    needs: Decimal
    wants: Decimal
    savings: Decimal


@dataclass(frozen=True)
class AllocationRecommendation:
    """Static 50/30/20 guideline compared with the actual savings rate."""

    split: AllocationSplit
    amounts: AllocationAmounts
    current_savings_rate: Decimal | None


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected balance at the end of a period."""

    month: int
    value: Decimal


@dataclass(frozen=True)
class GoalEstimate:
    """Time needed to reach a savings or net worth target.

    Attributes:
        months: Months until the target is reached, or the cap when it
            cannot be reached within the horizon.
        reachable: False when the cap was hit before reaching the target.
    """

    months: int
    reachable: bool

    @property
    def years(self) -> int:
        """Return the whole years part of the estimate."""
        return self.months // 12

    @property
    def remaining_months(self) -> int:
        """Return the months left over after whole years."""
        return self.months % 12


@dataclass(frozen=True)
class FinancialSummary:
    """Headline metrics shown on the dashboard."""

    monthly_income: Decimal
    monthly_burn_rate: Decimal
    savings_rate: Decimal
    total_assets: Decimal
    total_debt: Decimal
    net_worth: Decimal
    liquid_assets: Decimal
    total_minimum_payments: Decimal
    debt_to_income_ratio: Decimal
    emergency_fund: EmergencyFundProgress
    allocation: AllocationRecommendation

    @property
    def monthly_savings(self) -> Decimal:
        """Return income left after expenses each month."""
        return self.monthly_income - self.monthly_burn_rate


@dataclass(frozen=True)
class EmergencyFundPlan:
    """Emergency fund progress with a funding timeline."""

    progress: EmergencyFundProgress
    estimate: GoalEstimate
    projection: list[ProjectionPoint]
    monthly_savings: Decimal
    annual_return_percent: Decimal


@dataclass(frozen=True)
class LedgerBreakdowns:
    """Per-category views of the ledgers."""

    expenses_by_category: list[CategoryAmount]
    assets_by_category: list[CategoryAmount]
    expense_split: ExpenseSplit
    debts_by_interest_rate: list[Debt]


__all__ = [
    "ExpenseSplit",
    "CategoryAmount",
    "EmergencyFundProgress",
    "AllocationSplit",
    "AllocationAmounts",
    "AllocationRecommendation",
    "ProjectionPoint",
    "GoalEstimate",
    "FinancialSummary",
    "EmergencyFundPlan",
    "LedgerBreakdowns",
]
