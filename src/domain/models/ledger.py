"""Domain models for the four personal finance ledgers."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Frequency(str, Enum):
    """Period in which a recurring amount is stated."""

    MONTHLY = "monthly"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class AssetCategory(str, Enum):
    """Asset classes used for liquidity and breakdown reporting."""

    LIQUID = "liquid"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"
    PROPERTY = "property"
    VEHICLE = "vehicle"
    OTHER = "other"


@dataclass(frozen=True)
class IncomeSource:
    """Recurring income stated in its own frequency.

    Attributes:
        id: Unique record identifier.
        name: Display name of the source.
        amount: Amount received per period, not pre-normalized.
        frequency: Period the amount refers to.
    """

    id: str
    name: str
    amount: Decimal
    frequency: Frequency = Frequency.MONTHLY


@dataclass(frozen=True)
class Asset:
    """Point-in-time asset balance.

    Attributes:
        id: Unique record identifier.
        name: Display name of the asset.
        value: Current balance.
        category: Asset class.
        growth_rate: Optional fractional annual rate (0.07 = 7%/yr); interest
            for cash-like holdings, appreciation for property and vehicles.
    """

    id: str
    name: str
    value: Decimal
    category: AssetCategory = AssetCategory.OTHER
    growth_rate: Decimal | None = None


@dataclass(frozen=True)
class Debt:
    """Outstanding debt, either term-based or revolving.

    Attributes:
        id: Unique record identifier.
        name: Display name of the debt.
        balance: Outstanding balance.
        interest_rate: Fractional annual interest rate.
        minimum_payment: Minimum monthly payment.
        term_years: Loan term in years for term-based debts.
        revolving: Whether the debt is a revolving credit line.
    """

    id: str
    name: str
    balance: Decimal
    interest_rate: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")
    term_years: int | None = None
    revolving: bool = False


@dataclass(frozen=True)
class Expense:
    """Recurring expense stated in its own frequency."""

    id: str
    category: str
    name: str
    amount: Decimal
    frequency: Frequency = Frequency.MONTHLY
    essential: bool = False


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of all four ledgers at a point in time."""

    income: tuple[IncomeSource, ...] = field(default_factory=tuple)
    assets: tuple[Asset, ...] = field(default_factory=tuple)
    debts: tuple[Debt, ...] = field(default_factory=tuple)
    expenses: tuple[Expense, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Return True when no ledger holds any record."""
        return not (self.income or self.assets or self.debts or self.expenses)


__all__ = [
    "Frequency",
    "AssetCategory",
    "IncomeSource",
    "Asset",
    "Debt",
    "Expense",
    "LedgerSnapshot",
]
