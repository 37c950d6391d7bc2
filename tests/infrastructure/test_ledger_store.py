"""Tests for the in-memory ledger store."""

from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest

from src.domain.errors import LedgerRecordNotFoundError, LedgerValidationError
from src.domain.models.ledger import (
    Asset,
    Debt,
    Expense,
    IncomeSource,
    LedgerSnapshot,
)
from src.infrastructure.ledger_store import InMemoryLedgerStore


def _build_store(snapshot: LedgerSnapshot | None = None) -> InMemoryLedgerStore:
    ids = count(1)
    return InMemoryLedgerStore(
        snapshot,
        logger=MagicMock(),
        id_factory=lambda: f"id-{next(ids)}",
    )


def test_add_assigns_fresh_ids_and_keeps_order() -> None:
    store = _build_store()

    first = store.add_income(IncomeSource("", "Salary", Decimal("5000")))
    second = store.add_income(IncomeSource("ignored", "Bonus", Decimal("1200")))

    assert first.id == "id-1"
    assert second.id == "id-2"
    assert [item.name for item in store.snapshot().income] == ["Salary", "Bonus"]


def test_update_replaces_record_by_id() -> None:
    store = _build_store()
    stored = store.add_asset(Asset("", "Cash", Decimal("100")))

    updated = Asset(stored.id, "Cash", Decimal("250"))
    store.update_asset(updated)

    assert store.snapshot().assets == (updated,)


def test_update_unknown_id_raises() -> None:
    store = _build_store()

    with pytest.raises(LedgerRecordNotFoundError) as excinfo:
        store.update_debt(Debt("missing", "Loan", Decimal("10")))

    assert excinfo.value.ledger == "debt"
    assert "missing" in str(excinfo.value)


def test_delete_removes_record_by_id() -> None:
    store = _build_store()
    keep = store.add_expense(Expense("", "Food", "Groceries", Decimal("600")))
    drop = store.add_expense(Expense("", "Fun", "Cinema", Decimal("30")))

    store.delete_expense(drop.id)

    assert store.snapshot().expenses == (keep,)
    with pytest.raises(LedgerRecordNotFoundError):
        store.delete_expense(drop.id)


def test_invalid_records_are_rejected() -> None:
    store = _build_store()

    with pytest.raises(LedgerValidationError):
        store.add_debt(
            Debt("", "Odd", Decimal("10"), term_years=3, revolving=True)
        )
    with pytest.raises(LedgerValidationError):
        store.add_income(IncomeSource("", "Salary", Decimal("-1")))

    assert store.snapshot().is_empty


def test_snapshot_is_isolated_from_later_commands() -> None:
    """Snapshots taken before a change should not see the change."""
    store = _build_store()
    store.add_asset(Asset("", "Cash", Decimal("100")))
    before = store.load_snapshot()

    store.add_asset(Asset("", "Car", Decimal("9000")))

    assert len(before.assets) == 1
    assert len(store.load_snapshot().assets) == 2


def test_replace_is_all_or_nothing() -> None:
    store = _build_store(
        LedgerSnapshot(income=(IncomeSource("1", "Salary", Decimal("10")),))
    )
    bad = LedgerSnapshot(
        income=(IncomeSource("2", "Other", Decimal("5")),),
        assets=(Asset("3", "Broken", Decimal("-1")),),
    )

    with pytest.raises(LedgerValidationError):
        store.replace(bad)

    assert [item.id for item in store.snapshot().income] == ["1"]


def test_clear_empties_every_ledger() -> None:
    store = _build_store(
        LedgerSnapshot(income=(IncomeSource("1", "Salary", Decimal("10")),))
    )

    store.clear()

    assert store.snapshot().is_empty


def test_replace_rejects_duplicate_ids_within_a_ledger() -> None:
    """Two records sharing an id could never be edited apart."""
    store = _build_store(
        LedgerSnapshot(income=(IncomeSource("1", "Salary", Decimal("10")),))
    )
    duplicated = LedgerSnapshot(
        income=(
            IncomeSource("1", "Salary", Decimal("5000")),
            IncomeSource("1", "Bonus", Decimal("1200")),
        ),
    )

    with pytest.raises(LedgerValidationError, match="Duplicate income"):
        store.replace(duplicated)

    assert [item.name for item in store.snapshot().income] == ["Salary"]
    assert store.snapshot().income[0].amount == Decimal("10")


def test_same_id_in_different_ledgers_is_allowed() -> None:
    store = _build_store()

    store.replace(
        LedgerSnapshot(
            income=(IncomeSource("1", "Salary", Decimal("10")),),
            assets=(Asset("1", "Cash", Decimal("20")),),
        )
    )

    assert store.snapshot().assets[0].id == "1"


def test_non_finite_amounts_are_rejected() -> None:
    store = _build_store()

    with pytest.raises(LedgerValidationError):
        store.add_expense(Expense("", "Food", "Groceries", Decimal("NaN")))
    with pytest.raises(LedgerValidationError):
        store.add_asset(Asset("", "Cash", Decimal("Infinity")))

    assert store.snapshot().is_empty
