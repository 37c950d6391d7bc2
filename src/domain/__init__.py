"""Domain package for business rules and core models."""

from .errors import (
    FinanceDashboardError,
    InvalidFrequencyError,
    LedgerImportError,
    LedgerRecordNotFoundError,
    LedgerValidationError,
    ZeroDenominatorError,
)
from .models import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    Frequency,
    IncomeSource,
    LedgerSnapshot,
)
from .policies import RECOMMENDED_ALLOCATION, ZeroDenominatorPolicy

__all__ = [
    "FinanceDashboardError",
    "InvalidFrequencyError",
    "LedgerImportError",
    "LedgerRecordNotFoundError",
    "LedgerValidationError",
    "ZeroDenominatorError",
    "Asset",
    "AssetCategory",
    "Debt",
    "Expense",
    "Frequency",
    "IncomeSource",
    "LedgerSnapshot",
    "RECOMMENDED_ALLOCATION",
    "ZeroDenominatorPolicy",
]
