"""Domain models package."""

from .finance import (
    AllocationAmounts,
    AllocationRecommendation,
    AllocationSplit,
    CategoryAmount,
    EmergencyFundPlan,
    EmergencyFundProgress,
    ExpenseSplit,
    FinancialSummary,
    GoalEstimate,
    LedgerBreakdowns,
    ProjectionPoint,
)
from .ledger import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    Frequency,
    IncomeSource,
    LedgerSnapshot,
)

__all__ = [
    "Frequency",
    "AssetCategory",
    "IncomeSource",
    "Asset",
    "Debt",
    "Expense",
    "LedgerSnapshot",
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
