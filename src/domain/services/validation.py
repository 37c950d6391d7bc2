"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import Asset, Debt, Expense, IncomeSource


def _require_finite(label: str, value: Decimal) -> None:
    if not value.is_finite():
        raise LedgerValidationError(f"{label} must be a finite number: {value}")


def _require_non_negative(label: str, value: Decimal) -> None:
    _require_finite(label, value)
    if value < 0:
        raise LedgerValidationError(f"{label} must not be negative: {value}")


def _require_name(label: str, name: str) -> None:
    if not name or not name.strip():
        raise LedgerValidationError(f"{label} name must not be empty")


def validate_income(record: IncomeSource) -> IncomeSource:
    """Reject income sources with a blank name or negative amount."""
    _require_name("Income", record.name)
    _require_non_negative("Income amount", record.amount)
    return record


def validate_asset(record: Asset) -> Asset:
    """Reject assets with a blank name or negative value."""
    _require_name("Asset", record.name)
    _require_non_negative("Asset value", record.value)
    if record.growth_rate is not None:
        _require_finite("Asset growth rate", record.growth_rate)
    return record


def validate_debt(record: Debt) -> Debt:
    """Reject debts that break balance, payment or term rules.

    Args:
        record: Debt to check.

    Returns:
        Debt: The same record when valid.

    Raises:
        LedgerValidationError: If the balance, rate or payment is negative,
            the term is not a positive integer, or the debt is both
            term-based and revolving.
    """
    _require_name("Debt", record.name)
    _require_non_negative("Debt balance", record.balance)
    _require_non_negative("Debt interest rate", record.interest_rate)
    _require_non_negative("Debt minimum payment", record.minimum_payment)
    if record.term_years is not None:
        if record.revolving:
            raise LedgerValidationError(
                f"Debt '{record.name}' cannot be both term-based and revolving"
            )
        if record.term_years <= 0:
            raise LedgerValidationError(
                f"Debt term must be a positive number of years: {record.term_years}"
            )
    return record


def validate_expense(record: Expense) -> Expense:
    """Reject expenses with a blank name or negative amount."""
    _require_name("Expense", record.name)
    _require_non_negative("Expense amount", record.amount)
    return record


def validate_unique_ids(ledger: str, records: Iterable) -> None:
    """Reject a ledger in which two records share an id.

    Args:
        ledger: Ledger name used in the error message.
        records: Records carrying an ``id`` attribute.

    Raises:
        LedgerValidationError: On the first repeated id.
    """
    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise LedgerValidationError(
                f"Duplicate {ledger} record id: {record.id}"
            )
        seen.add(record.id)


__all__ = [
    "validate_income",
    "validate_asset",
    "validate_debt",
    "validate_expense",
    "validate_unique_ids",
]
