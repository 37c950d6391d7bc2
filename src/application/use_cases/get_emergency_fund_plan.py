"""Use case to plan funding of the emergency ("3X") account."""

from decimal import Decimal

from src.application.ports.ledger_source import LedgerSourcePort
from src.domain.constants import (
    DEFAULT_EMERGENCY_FUND_MULTIPLIER,
    DEFAULT_MAX_PROJECTION_MONTHS,
    EMERGENCY_FUND_PROJECTION_MONTHS,
)
from src.domain.models.finance import EmergencyFundPlan
from src.domain.services.finance import emergency_fund_progress
from src.domain.services.projection import (
    estimate_time_to_target,
    project_net_worth,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetEmergencyFundPlanUseCase:
    """Estimate when liquid savings will cover the emergency fund goal."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        logger=None,
        emergency_fund_multiplier: Decimal = DEFAULT_EMERGENCY_FUND_MULTIPLIER,
        max_months: int = DEFAULT_MAX_PROJECTION_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_source: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            emergency_fund_multiplier: Years of expenses the fund covers.
            max_months: Cap for the time-to-target search.
        """
        self._ledger_source = ledger_source
        self._logger = logger or get_app_logger()
        self._multiplier = emergency_fund_multiplier
        self._max_months = max_months

    def execute(
        self,
        monthly_savings,
        annual_return_percent,
    ) -> EmergencyFundPlan:
        """Return progress, time to target and a short projection.

        Args:
            monthly_savings: Amount added to liquid savings each month.
            annual_return_percent: Expected annual return in percent.

        Returns:
            EmergencyFundPlan: The projection covers at most three years and
            stops at the month the goal is reached.
        """
        snapshot = self._ledger_source.load_snapshot()
        progress = emergency_fund_progress(
            snapshot.assets,
            snapshot.expenses,
            self._multiplier,
            logger=self._logger,
        )
        savings = coerce_decimal(monthly_savings)
        annual_return = coerce_decimal(annual_return_percent)
        estimate = estimate_time_to_target(
            progress.current,
            progress.target,
            savings,
            annual_return,
            self._max_months,
        )
        horizon = min(EMERGENCY_FUND_PROJECTION_MONTHS, estimate.months)
        projection = list(
            project_net_worth(progress.current, savings, annual_return, horizon)
        )
        if estimate.reachable:
            self._logger.info(
                f"Emergency fund reached in {estimate.months} months "
                f"(target={progress.target:.2f})"
            )
        else:
            self._logger.warning(
                f"Emergency fund target {progress.target:.2f} not reachable "
                f"within {self._max_months} months"
            )
        return EmergencyFundPlan(
            progress=progress,
            estimate=estimate,
            projection=projection,
            monthly_savings=savings,
            annual_return_percent=annual_return,
        )


__all__ = ["GetEmergencyFundPlanUseCase", "EmergencyFundPlan"]
