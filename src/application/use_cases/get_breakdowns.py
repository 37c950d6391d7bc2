"""Use case to build per-category views of the ledgers."""

from src.application.ports.ledger_source import LedgerSourcePort
from src.domain.models.finance import LedgerBreakdowns
from src.domain.services.finance import (
    assets_by_category,
    debts_by_interest_rate,
    essential_vs_discretionary,
    expenses_by_category,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBreakdownsUseCase:
    """Group expenses, assets and debts for charts and tables."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        logger=None,
    ) -> None:
        self._ledger_source = ledger_source
        self._logger = logger or get_app_logger()

    def execute(self) -> LedgerBreakdowns:
        """Return the ledger breakdowns for the current snapshot."""
        snapshot = self._ledger_source.load_snapshot()
        breakdowns = LedgerBreakdowns(
            expenses_by_category=expenses_by_category(snapshot.expenses),
            assets_by_category=assets_by_category(snapshot.assets),
            expense_split=essential_vs_discretionary(snapshot.expenses),
            debts_by_interest_rate=debts_by_interest_rate(snapshot.debts),
        )
        self._logger.info(
            f"Breakdowns computed: {len(breakdowns.expenses_by_category)} "
            f"expense categories, {len(breakdowns.assets_by_category)} "
            f"asset categories"
        )
        return breakdowns


__all__ = ["GetBreakdownsUseCase", "LedgerBreakdowns"]
