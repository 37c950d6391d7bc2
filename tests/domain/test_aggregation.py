"""Tests for the summation helpers."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.domain.errors import InvalidFrequencyError
from src.domain.services.aggregation import group_sum, sum_amounts


def _row(amount: str, frequency: str = "monthly", key: str = "a", flag=True):
    return SimpleNamespace(
        amount=Decimal(amount),
        frequency=frequency,
        key=key,
        flag=flag,
    )


def test_sum_amounts_empty_is_zero() -> None:
    """Empty ledgers should sum to zero."""
    assert sum_amounts([], amount_of=lambda row: row.amount) == Decimal("0")


def test_sum_amounts_without_frequency_sums_raw_values() -> None:
    rows = [_row("10", "weekly"), _row("5.5", "annually")]

    assert sum_amounts(rows, amount_of=lambda row: row.amount) == Decimal("15.5")


def test_sum_amounts_normalizes_when_frequency_given() -> None:
    rows = [_row("100"), _row("1200", "annually"), _row("300", "quarterly")]

    total = sum_amounts(
        rows,
        amount_of=lambda row: row.amount,
        frequency_of=lambda row: row.frequency,
    )

    assert total == Decimal("300")


def test_sum_amounts_applies_predicate_before_summing() -> None:
    rows = [_row("100", flag=True), _row("40", flag=False)]

    total = sum_amounts(
        rows,
        amount_of=lambda row: row.amount,
        predicate=lambda row: row.flag,
    )

    assert total == Decimal("100")


def test_sum_amounts_propagates_invalid_frequency() -> None:
    rows = [_row("100", "fortnightly")]

    with pytest.raises(InvalidFrequencyError):
        sum_amounts(
            rows,
            amount_of=lambda row: row.amount,
            frequency_of=lambda row: row.frequency,
        )


def test_group_sum_keeps_first_occurrence_order() -> None:
    """Keys should appear in the order they are first seen."""
    rows = [
        _row("10", key="food"),
        _row("20", key="housing"),
        _row("5", key="food"),
        _row("1200", "annually", key="insurance"),
    ]

    totals = group_sum(
        rows,
        key_of=lambda row: row.key,
        amount_of=lambda row: row.amount,
        frequency_of=lambda row: row.frequency,
    )

    assert list(totals) == ["food", "housing", "insurance"]
    assert totals == {
        "food": Decimal("15"),
        "housing": Decimal("20"),
        "insurance": Decimal("100"),
    }


def test_group_sum_empty_is_empty_mapping() -> None:
    assert group_sum([], key_of=lambda row: row, amount_of=lambda row: row) == {}
