"""JSON import/export of the four ledgers.

Documents are objects with ``income``, ``assets``, ``debts`` and ``expenses``
arrays. Field names are camelCase. Imports also accept the legacy keys used
by older exports (``source`` for income names, ``amount`` for debt balances,
``type`` for asset categories, ``interestRate``/``appreciationRate`` for
asset growth rates).
"""

from collections.abc import Callable, Mapping
from decimal import Decimal
import json
from pathlib import Path
from typing import Any

from src.domain.errors import (
    InvalidFrequencyError,
    LedgerImportError,
    LedgerValidationError,
)
from src.domain.models.ledger import (
    Asset,
    Debt,
    Expense,
    IncomeSource,
    LedgerSnapshot,
)
from src.domain.services.normalization import (
    normalize_asset_category,
    normalize_category,
    normalize_frequency,
)
from src.domain.services.validation import (
    validate_asset,
    validate_debt,
    validate_expense,
    validate_income,
    validate_unique_ids,
)
from src.infrastructure.ledger_store import new_record_id
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal

LEDGER_KEYS = ("income", "assets", "debts", "expenses")
TRUE_VALUES = ("true", "yes", "1")
FALSE_VALUES = ("false", "no", "0")


def _number(value: Decimal) -> int | float:
    """Render a Decimal as the closest JSON number."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def income_to_dict(record: IncomeSource) -> dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "amount": _number(record.amount),
        "frequency": record.frequency.value,
    }


def asset_to_dict(record: Asset) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": record.id,
        "name": record.name,
        "value": _number(record.value),
        "category": record.category.value,
    }
    if record.growth_rate is not None:
        payload["growthRate"] = _number(record.growth_rate)
    return payload


def debt_to_dict(record: Debt) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": record.id,
        "name": record.name,
        "balance": _number(record.balance),
        "interestRate": _number(record.interest_rate),
        "minimumPayment": _number(record.minimum_payment),
    }
    if record.term_years is not None:
        payload["term"] = record.term_years
    if record.revolving:
        payload["revolving"] = True
    return payload


def expense_to_dict(record: Expense) -> dict[str, Any]:
    return {
        "id": record.id,
        "category": record.category,
        "name": record.name,
        "amount": _number(record.amount),
        "frequency": record.frequency.value,
        "essential": record.essential,
    }


def snapshot_to_dict(snapshot: LedgerSnapshot) -> dict[str, list[dict]]:
    """Convert a snapshot to a JSON-ready mapping."""
    return {
        "income": [income_to_dict(item) for item in snapshot.income],
        "assets": [asset_to_dict(item) for item in snapshot.assets],
        "debts": [debt_to_dict(item) for item in snapshot.debts],
        "expenses": [expense_to_dict(item) for item in snapshot.expenses],
    }


def dumps_ledger(snapshot: LedgerSnapshot, indent: int | None = 2) -> str:
    """Serialize a snapshot to a JSON document."""
    return json.dumps(snapshot_to_dict(snapshot), indent=indent)


def _record_id(raw: Mapping[str, Any]) -> str:
    value = raw.get("id")
    if value is None or value == "":
        return new_record_id()
    return str(value)


def _first(raw: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _flag(raw: Mapping[str, Any], key: str) -> bool:
    """Read a boolean field, accepting JSON booleans, 0/1 and their strings."""
    value = raw.get(key)
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
    raise LedgerValidationError(f"Invalid {key} flag: {value!r}")


def income_from_dict(raw: Mapping[str, Any]) -> IncomeSource:
    return validate_income(
        IncomeSource(
            id=_record_id(raw),
            name=str(_first(raw, "name", "source", default="")),
            amount=coerce_decimal(raw.get("amount")),
            frequency=normalize_frequency(raw.get("frequency", "monthly")),
        )
    )


def asset_from_dict(raw: Mapping[str, Any]) -> Asset:
    return validate_asset(
        Asset(
            id=_record_id(raw),
            name=str(raw.get("name", "")),
            value=coerce_decimal(raw.get("value")),
            category=normalize_asset_category(_first(raw, "category", "type")),
            growth_rate=coerce_optional_decimal(
                _first(raw, "growthRate", "interestRate", "appreciationRate")
            ),
        )
    )


def debt_from_dict(raw: Mapping[str, Any]) -> Debt:
    term = raw.get("term")
    if term in (None, ""):
        term_years = None
    else:
        try:
            term_years = int(term)
        except (TypeError, ValueError) as exc:
            raise LedgerValidationError(f"Invalid debt term: {term!r}") from exc
    return validate_debt(
        Debt(
            id=_record_id(raw),
            name=str(raw.get("name", "")),
            balance=coerce_decimal(_first(raw, "balance", "amount")),
            interest_rate=coerce_decimal(raw.get("interestRate")),
            minimum_payment=coerce_decimal(raw.get("minimumPayment")),
            term_years=term_years,
            revolving=_flag(raw, "revolving"),
        )
    )


def expense_from_dict(raw: Mapping[str, Any]) -> Expense:
    return validate_expense(
        Expense(
            id=_record_id(raw),
            category=normalize_category(raw.get("category")),
            name=str(raw.get("name", "")),
            amount=coerce_decimal(raw.get("amount")),
            frequency=normalize_frequency(raw.get("frequency", "monthly")),
            essential=_flag(raw, "essential"),
        )
    )


def _parse_ledger(
    document: Mapping[str, Any],
    key: str,
    parse: Callable[[Mapping[str, Any]], Any],
) -> tuple:
    items = document.get(key, [])
    if not isinstance(items, list):
        raise LedgerImportError(f"'{key}' must be a list")
    records = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise LedgerImportError(f"{key}[{position}] must be an object")
        try:
            records.append(parse(item))
        except (InvalidFrequencyError, LedgerValidationError):
            raise
        except ValueError as exc:
            raise LedgerValidationError(f"{key}[{position}]: {exc}") from exc
    validate_unique_ids(key, records)
    return tuple(records)


def snapshot_from_dict(document: Mapping[str, Any]) -> LedgerSnapshot:
    """Build a validated snapshot from a decoded ledger document.

    Args:
        document: Mapping with any of the four ledger keys.

    Returns:
        LedgerSnapshot: Parsed and validated ledgers.

    Raises:
        LedgerImportError: If the document shape is wrong.
        LedgerValidationError: If a record breaks its invariants.
        InvalidFrequencyError: If a record uses an unknown frequency.
    """
    if not isinstance(document, Mapping):
        raise LedgerImportError("Ledger document must be a JSON object")
    if not any(key in document for key in LEDGER_KEYS):
        raise LedgerImportError(
            f"Ledger document needs at least one of {', '.join(LEDGER_KEYS)}"
        )
    return LedgerSnapshot(
        income=_parse_ledger(document, "income", income_from_dict),
        assets=_parse_ledger(document, "assets", asset_from_dict),
        debts=_parse_ledger(document, "debts", debt_from_dict),
        expenses=_parse_ledger(document, "expenses", expense_from_dict),
    )


def loads_ledger(text: str | bytes) -> LedgerSnapshot:
    """Parse a JSON ledger document."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LedgerImportError(f"Invalid ledger JSON: {exc}") from exc
    return snapshot_from_dict(document)


def read_ledger_file(path: Path) -> LedgerSnapshot:
    """Load a ledger export from disk."""
    return loads_ledger(Path(path).read_text(encoding="utf-8"))


def write_ledger_file(path: Path, snapshot: LedgerSnapshot) -> Path:
    """Write a ledger export to disk, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dumps_ledger(snapshot), encoding="utf-8")
    return target


__all__ = [
    "dumps_ledger",
    "loads_ledger",
    "read_ledger_file",
    "write_ledger_file",
    "snapshot_to_dict",
    "snapshot_from_dict",
]
