"""Use case to compute the headline dashboard metrics."""

from decimal import Decimal

from src.application.ports.ledger_source import LedgerSourcePort
from src.domain.constants import DEFAULT_EMERGENCY_FUND_MULTIPLIER
from src.domain.models.finance import FinancialSummary
from src.domain.services.finance import (
    debt_to_income_ratio,
    emergency_fund_progress,
    liquid_assets,
    monthly_burn_rate,
    monthly_income,
    recommended_allocation,
    savings_rate,
    total_assets,
    total_debt,
    total_minimum_payments,
)
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute income, spending, net worth and goal metrics."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        logger=None,
        emergency_fund_multiplier: Decimal = DEFAULT_EMERGENCY_FUND_MULTIPLIER,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_source: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            emergency_fund_multiplier: Years of expenses the fund covers.
        """
        self._ledger_source = ledger_source
        self._logger = logger or get_app_logger()
        self._multiplier = emergency_fund_multiplier

    def execute(self) -> FinancialSummary:
        """Return the financial summary for the current ledgers.

        Returns:
            FinancialSummary: Metrics derived from one snapshot. Empty
            ledgers produce zeros, never errors.
        """
        snapshot = self._ledger_source.load_snapshot()
        income = monthly_income(snapshot.income)
        burn = monthly_burn_rate(snapshot.expenses)
        assets_total = total_assets(snapshot.assets)
        debt_total = total_debt(snapshot.debts)

        summary = FinancialSummary(
            monthly_income=income,
            monthly_burn_rate=burn,
            savings_rate=savings_rate(
                snapshot.income,
                snapshot.expenses,
                logger=self._logger,
            ),
            total_assets=assets_total,
            total_debt=debt_total,
            net_worth=assets_total - debt_total,
            liquid_assets=liquid_assets(snapshot.assets),
            total_minimum_payments=total_minimum_payments(snapshot.debts),
            debt_to_income_ratio=debt_to_income_ratio(
                snapshot.debts,
                snapshot.income,
                logger=self._logger,
            ),
            emergency_fund=emergency_fund_progress(
                snapshot.assets,
                snapshot.expenses,
                self._multiplier,
                logger=self._logger,
            ),
            allocation=recommended_allocation(
                snapshot.income,
                snapshot.expenses,
                logger=self._logger,
            ),
        )
        self._logger.info(
            f"Financial summary computed: income={income:.2f}, "
            f"burn={burn:.2f}, net_worth={summary.net_worth:.2f}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
