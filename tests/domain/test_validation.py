"""Tests for ledger record validation."""

from decimal import Decimal

import pytest

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import Asset, Debt, Expense, IncomeSource
from src.domain.services.validation import (
    validate_asset,
    validate_debt,
    validate_expense,
    validate_income,
)


def test_valid_records_are_returned_unchanged() -> None:
    income = IncomeSource("1", "Salary", Decimal("5000"))
    debt = Debt("1", "Card", Decimal("100"), revolving=True)

    assert validate_income(income) is income
    assert validate_debt(debt) is debt


@pytest.mark.parametrize(
    ("validate", "record"),
    [
        (validate_income, IncomeSource("1", "Salary", Decimal("-1"))),
        (validate_asset, Asset("1", "Cash", Decimal("-0.01"))),
        (validate_debt, Debt("1", "Loan", Decimal("-5"))),
        (validate_debt, Debt("1", "Loan", Decimal("5"), minimum_payment=Decimal("-1"))),
        (validate_expense, Expense("1", "Food", "Groceries", Decimal("-20"))),
    ],
)
def test_negative_amounts_are_rejected(validate, record) -> None:
    with pytest.raises(LedgerValidationError):
        validate(record)


def test_debt_cannot_be_term_and_revolving() -> None:
    """A debt is either term-based or revolving, never both."""
    debt = Debt("1", "Odd", Decimal("10"), term_years=5, revolving=True)

    with pytest.raises(LedgerValidationError, match="both"):
        validate_debt(debt)


def test_debt_term_must_be_positive() -> None:
    with pytest.raises(LedgerValidationError):
        validate_debt(Debt("1", "Loan", Decimal("10"), term_years=0))


def test_blank_names_are_rejected() -> None:
    with pytest.raises(LedgerValidationError, match="name"):
        validate_asset(Asset("1", "  ", Decimal("10")))
