"""In-memory ledger store owning the mutable ledgers.

The store is the single writer of ledger state. Every change goes through an
add/update/delete command and readers only ever see immutable snapshots.
"""

from dataclasses import replace
from typing import Callable, TypeVar
import uuid

from src.application.ports.ledger_source import LedgerSourcePort
from src.domain.errors import LedgerRecordNotFoundError
from src.domain.models.ledger import (
    Asset,
    Debt,
    Expense,
    IncomeSource,
    LedgerSnapshot,
)
from src.domain.services.validation import (
    validate_asset,
    validate_debt,
    validate_expense,
    validate_income,
    validate_unique_ids,
)
from src.infrastructure.logging.logger import get_app_logger

R = TypeVar("R", IncomeSource, Asset, Debt, Expense)


def new_record_id() -> str:
    """Return a fresh unique record identifier."""
    return uuid.uuid4().hex


class InMemoryLedgerStore(LedgerSourcePort):
    """Ledger state held in memory for a single dashboard session."""

    def __init__(
        self,
        snapshot: LedgerSnapshot | None = None,
        logger=None,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        """Initialize the store.

        Args:
            snapshot: Optional initial ledgers; records are validated.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Generates ids for newly added records.
        """
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory
        self._income: list[IncomeSource] = []
        self._assets: list[Asset] = []
        self._debts: list[Debt] = []
        self._expenses: list[Expense] = []
        if snapshot is not None:
            self.replace(snapshot)

    def load_snapshot(self) -> LedgerSnapshot:
        """Return an immutable snapshot of the current ledgers."""
        return self.snapshot()

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            income=tuple(self._income),
            assets=tuple(self._assets),
            debts=tuple(self._debts),
            expenses=tuple(self._expenses),
        )

    def replace(self, snapshot: LedgerSnapshot) -> None:
        """Swap every ledger for the snapshot's contents.

        Raises:
            LedgerValidationError: If any record is invalid or two records
                in one ledger share an id; the store is left unchanged in
                that case.
        """
        income = [validate_income(record) for record in snapshot.income]
        assets = [validate_asset(record) for record in snapshot.assets]
        debts = [validate_debt(record) for record in snapshot.debts]
        expenses = [validate_expense(record) for record in snapshot.expenses]
        validate_unique_ids("income", income)
        validate_unique_ids("asset", assets)
        validate_unique_ids("debt", debts)
        validate_unique_ids("expense", expenses)
        self._income = income
        self._assets = assets
        self._debts = debts
        self._expenses = expenses
        self._logger.info(
            f"Ledgers replaced: income={len(income)}, assets={len(assets)}, "
            f"debts={len(debts)}, expenses={len(expenses)}"
        )

    def clear(self) -> None:
        self.replace(LedgerSnapshot())

    def add_income(self, record: IncomeSource) -> IncomeSource:
        return self._add("income", self._income, record, validate_income)

    def update_income(self, record: IncomeSource) -> IncomeSource:
        return self._update("income", self._income, record, validate_income)

    def delete_income(self, record_id: str) -> None:
        self._delete("income", self._income, record_id)

    def add_asset(self, record: Asset) -> Asset:
        return self._add("asset", self._assets, record, validate_asset)

    def update_asset(self, record: Asset) -> Asset:
        return self._update("asset", self._assets, record, validate_asset)

    def delete_asset(self, record_id: str) -> None:
        self._delete("asset", self._assets, record_id)

    def add_debt(self, record: Debt) -> Debt:
        return self._add("debt", self._debts, record, validate_debt)

    def update_debt(self, record: Debt) -> Debt:
        return self._update("debt", self._debts, record, validate_debt)

    def delete_debt(self, record_id: str) -> None:
        self._delete("debt", self._debts, record_id)

    def add_expense(self, record: Expense) -> Expense:
        return self._add("expense", self._expenses, record, validate_expense)

    def update_expense(self, record: Expense) -> Expense:
        return self._update("expense", self._expenses, record, validate_expense)

    def delete_expense(self, record_id: str) -> None:
        self._delete("expense", self._expenses, record_id)

    def _add(
        self,
        ledger: str,
        records: list[R],
        record: R,
        validate: Callable[[R], R],
    ) -> R:
        """Append a record under a freshly generated id."""
        stored = validate(replace(record, id=self._id_factory()))
        records.append(stored)
        self._logger.info(f"Added {ledger} record id={stored.id}")
        return stored

    def _update(
        self,
        ledger: str,
        records: list[R],
        record: R,
        validate: Callable[[R], R],
    ) -> R:
        """Replace the record sharing the given record's id."""
        validate(record)
        for index, existing in enumerate(records):
            if existing.id == record.id:
                records[index] = record
                self._logger.info(f"Updated {ledger} record id={record.id}")
                return record
        raise LedgerRecordNotFoundError(ledger, record.id)

    def _delete(self, ledger: str, records: list[R], record_id: str) -> None:
        for index, existing in enumerate(records):
            if existing.id == record_id:
                del records[index]
                self._logger.info(f"Deleted {ledger} record id={record_id}")
                return
        raise LedgerRecordNotFoundError(ledger, record_id)


__all__ = ["InMemoryLedgerStore", "new_record_id"]
