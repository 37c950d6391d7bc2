"""CLI adapter printing the financial summary of a ledger.

This module wires the GetFinancialSummaryUseCase to the configured ledger
store and provides a simple command-line entry point.
"""

from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.domain.errors import FinanceDashboardError
from src.infrastructure.container import build_ledger_store, build_settings
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Load the configured ledger and print its headline metrics."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        store = build_ledger_store(settings)
    except (FinanceDashboardError, OSError) as exc:
        logger.error(f"Could not load ledger: {exc}")
        print(f"Could not load ledger: {exc}")
        return

    use_case = GetFinancialSummaryUseCase(
        ledger_source=store,
        logger=logger,
        emergency_fund_multiplier=settings.emergency_fund_multiplier,
    )
    summary = use_case.execute()
    fund = summary.emergency_fund

    print(f"Monthly income: {summary.monthly_income:,.2f}")
    print(f"Monthly burn rate: {summary.monthly_burn_rate:,.2f}")
    print(f"Savings rate: {summary.savings_rate:.1f}%")
    print(
        f"Net worth: {summary.net_worth:,.2f} "
        f"(assets={summary.total_assets:,.2f}, debt={summary.total_debt:,.2f})"
    )
    print(f"Debt-to-income: {summary.debt_to_income_ratio * 100:.1f}%")
    print(
        f"Emergency fund: {fund.current:,.2f} / {fund.target:,.2f} "
        f"({fund.percent_complete:.1f}%, shortfall={fund.shortfall:,.2f})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
