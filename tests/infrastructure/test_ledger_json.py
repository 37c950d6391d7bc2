"""Tests for ledger JSON import/export."""

from decimal import Decimal
import json
from pathlib import Path

import pytest

from src.domain.errors import (
    InvalidFrequencyError,
    LedgerImportError,
    LedgerValidationError,
)
from src.domain.models.ledger import AssetCategory, Frequency
from src.infrastructure.ledger_json import (
    dumps_ledger,
    loads_ledger,
    read_ledger_file,
    snapshot_to_dict,
    write_ledger_file,
)
from src.infrastructure.sample_ledger import build_sample_ledger

LEGACY_DOCUMENT = {
    "income": [
        {"id": 1, "source": "Salary", "amount": 5000, "frequency": "monthly"},
        {"id": 3, "source": "Dividends", "amount": 500, "frequency": "quarterly"},
    ],
    "assets": [
        {"id": 1, "name": "Checking", "value": 10000, "type": "liquid", "interestRate": 0.01},
        {"id": 6, "name": "Home", "value": 350000, "type": "property", "appreciationRate": 0.03},
    ],
    "debts": [
        {"id": 1, "name": "Mortgage", "amount": 280000, "interestRate": 0.0375, "minimumPayment": 1500, "term": 30},
        {"id": 4, "name": "Credit Card", "amount": 2000, "interestRate": 0.185, "minimumPayment": 100, "revolving": True},
    ],
    "expenses": [
        {"id": 1, "category": "Housing", "name": "Mortgage", "amount": 1500, "frequency": "monthly", "essential": True},
    ],
}


def test_loads_accepts_legacy_keys() -> None:
    """Older exports name fields differently; they should still import."""
    snapshot = loads_ledger(json.dumps(LEGACY_DOCUMENT))

    assert snapshot.income[0].id == "1"
    assert snapshot.income[0].name == "Salary"
    assert snapshot.income[1].frequency is Frequency.QUARTERLY
    assert snapshot.assets[0].category is AssetCategory.LIQUID
    assert snapshot.assets[0].growth_rate == Decimal("0.01")
    assert snapshot.assets[1].growth_rate == Decimal("0.03")
    assert snapshot.debts[0].balance == Decimal("280000")
    assert snapshot.debts[0].term_years == 30
    assert snapshot.debts[1].revolving is True
    assert snapshot.debts[1].term_years is None
    assert snapshot.expenses[0].essential is True


def test_dumps_uses_top_level_ledger_keys() -> None:
    document = json.loads(dumps_ledger(build_sample_ledger()))

    assert list(document) == ["income", "assets", "debts", "expenses"]
    mortgage = document["debts"][0]
    assert mortgage["balance"] == 280000
    assert mortgage["minimumPayment"] == 1500
    assert mortgage["term"] == 30
    assert "revolving" not in mortgage
    assert document["assets"][0]["growthRate"] == 0.01


def test_export_then_import_restores_sample_ledger() -> None:
    snapshot = build_sample_ledger()

    assert loads_ledger(dumps_ledger(snapshot)) == snapshot


def test_missing_ids_are_generated() -> None:
    snapshot = loads_ledger('{"income": [{"name": "Gig", "amount": 10}]}')

    assert snapshot.income[0].id
    assert snapshot.assets == ()


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"unrelated": []}',
        '{"income": {"name": "x"}}',
        '{"income": ["salary"]}',
    ],
)
def test_malformed_documents_raise_import_error(text: str) -> None:
    with pytest.raises(LedgerImportError):
        loads_ledger(text)


def test_unknown_frequency_is_rejected() -> None:
    text = '{"expenses": [{"name": "Coffee", "amount": 3, "frequency": "daily"}]}'

    with pytest.raises(InvalidFrequencyError):
        loads_ledger(text)


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Cash", "value": -5},
        {"name": "Cash", "value": "lots"},
    ],
)
def test_invalid_records_raise_validation_error(record) -> None:
    with pytest.raises(LedgerValidationError):
        loads_ledger(json.dumps({"assets": [record]}))


def test_invalid_debt_term_raises_validation_error() -> None:
    text = '{"debts": [{"name": "Loan", "balance": 10, "term": "soon"}]}'

    with pytest.raises(LedgerValidationError):
        loads_ledger(text)


def test_write_and_read_ledger_file(tmp_path: Path) -> None:
    snapshot = build_sample_ledger()
    path = tmp_path / "exports" / "ledger.json"

    written = write_ledger_file(path, snapshot)

    assert written.exists()
    assert read_ledger_file(written) == snapshot
    assert json.loads(path.read_text()) == snapshot_to_dict(snapshot)


def test_duplicate_ids_in_one_ledger_are_rejected() -> None:
    text = json.dumps(
        {
            "income": [
                {"id": 1, "name": "Salary", "amount": 5000},
                {"id": 1, "name": "Bonus", "amount": 1200},
            ]
        }
    )

    with pytest.raises(LedgerValidationError, match="Duplicate income"):
        loads_ledger(text)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_numbers_raise_validation_error(literal: str) -> None:
    """Python's json module accepts these literals; the ledger must not."""
    text = '{"income": [{"name": "Salary", "amount": %s}]}' % literal

    with pytest.raises(LedgerValidationError):
        loads_ledger(text)


def test_non_finite_growth_rate_raises_validation_error() -> None:
    text = '{"assets": [{"name": "Cash", "value": 10, "growthRate": NaN}]}'

    with pytest.raises(LedgerValidationError):
        loads_ledger(text)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, True),
        (False, False),
        ("true", True),
        ("false", False),
        ("No", False),
        (" yes ", True),
        (1, True),
        (0, False),
        ("", False),
    ],
)
def test_flags_parse_strings_and_numbers(raw, expected: bool) -> None:
    document = {
        "debts": [{"name": "Card", "balance": 10, "revolving": raw}],
        "expenses": [{"name": "Rent", "amount": 900, "essential": raw}],
    }

    snapshot = loads_ledger(json.dumps(document))

    assert snapshot.debts[0].revolving is expected
    assert snapshot.expenses[0].essential is expected


def test_unreadable_flag_raises_validation_error() -> None:
    text = '{"expenses": [{"name": "Rent", "amount": 900, "essential": "maybe"}]}'

    with pytest.raises(LedgerValidationError, match="essential"):
        loads_ledger(text)
