"""Tests for the GetEmergencyFundPlanUseCase."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_emergency_fund_plan import (
    GetEmergencyFundPlanUseCase,
)
from src.domain.models.ledger import (
    Asset,
    AssetCategory,
    Expense,
    LedgerSnapshot,
)


def _build_use_case(liquid: str, logger, max_months: int = 600):
    snapshot = LedgerSnapshot(
        assets=(Asset("a1", "Savings", Decimal(liquid), AssetCategory.LIQUID),),
        expenses=(Expense("e1", "Housing", "Rent", Decimal("3000")),),
    )
    return GetEmergencyFundPlanUseCase(
        ledger_source=SimpleNamespace(load_snapshot=lambda: snapshot),
        logger=logger,
        max_months=max_months,
    )


def test_execute_estimates_time_to_target() -> None:
    """Projection should stop at three years when the goal is further out."""
    logger = MagicMock()

    plan = _build_use_case("10000", logger).execute(
        monthly_savings=1000,
        annual_return_percent=0,
    )

    assert plan.progress.target == Decimal("108000")
    assert plan.estimate.months == 98
    assert plan.estimate.reachable is True
    assert plan.estimate.years == 8
    assert len(plan.projection) == 37
    assert plan.projection[0].value == Decimal("10000")
    assert plan.projection[-1].value == Decimal("46000")
    assert plan.monthly_savings == Decimal("1000")
    logger.info.assert_called_once()


def test_execute_stops_projection_when_target_reached() -> None:
    plan = _build_use_case("100000", MagicMock()).execute(
        monthly_savings=Decimal("2000"),
        annual_return_percent=Decimal("0"),
    )

    assert plan.estimate.months == 4
    assert len(plan.projection) == 5


def test_execute_warns_when_unreachable() -> None:
    logger = MagicMock()

    plan = _build_use_case("0", logger, max_months=120).execute(
        monthly_savings=0,
        annual_return_percent=0,
    )

    assert plan.estimate.months == 120
    assert plan.estimate.reachable is False
    assert len(plan.projection) == 37
    logger.warning.assert_called_once()


def test_execute_already_funded() -> None:
    plan = _build_use_case("200000", MagicMock()).execute(
        monthly_savings=500,
        annual_return_percent=7,
    )

    assert plan.progress.is_funded is True
    assert plan.estimate.months == 0
    assert [point.month for point in plan.projection] == [0]
