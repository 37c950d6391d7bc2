"""Use case to project net worth forward."""

from src.application.ports.ledger_source import LedgerSourcePort
from src.domain.models.finance import ProjectionPoint
from src.domain.services.finance import net_worth
from src.domain.services.projection import (
    project_annual_net_worth,
    project_net_worth,
)
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthProjectionUseCase:
    """Project current net worth under contributions and compounding."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_source: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_source = ledger_source
        self._logger = logger or get_app_logger()

    def execute(
        self,
        monthly_contribution,
        annual_return_percent,
        horizon_months: int,
    ) -> list[ProjectionPoint]:
        """Return month-by-month projected net worth.

        Args:
            monthly_contribution: Amount added each month.
            annual_return_percent: Expected annual return in percent.
            horizon_months: Number of months to project.

        Returns:
            list[ProjectionPoint]: ``horizon_months + 1`` points from month 0.
        """
        snapshot = self._ledger_source.load_snapshot()
        start = net_worth(snapshot.assets, snapshot.debts)
        points = list(
            project_net_worth(
                start,
                monthly_contribution,
                annual_return_percent,
                horizon_months,
            )
        )
        self._logger.info(
            f"Projected net worth from {start:.2f} to "
            f"{points[-1].value:.2f} over {horizon_months} months"
        )
        return points

    def execute_annual(
        self,
        annual_contribution,
        annual_return_percent,
        years: int,
    ) -> list[ProjectionPoint]:
        """Return year-by-year projected net worth with annual compounding.

        Args:
            annual_contribution: Amount added at the end of each year.
            annual_return_percent: Expected annual return in percent.
            years: Number of years to project.

        Returns:
            list[ProjectionPoint]: ``years + 1`` points; ``month`` holds the
            year number.
        """
        snapshot = self._ledger_source.load_snapshot()
        start = net_worth(snapshot.assets, snapshot.debts)
        points = project_annual_net_worth(
            start,
            annual_contribution,
            annual_return_percent,
            years,
        )
        self._logger.info(
            f"Projected net worth from {start:.2f} to "
            f"{points[-1].value:.2f} over {years} years"
        )
        return points


__all__ = ["GetNetWorthProjectionUseCase"]
