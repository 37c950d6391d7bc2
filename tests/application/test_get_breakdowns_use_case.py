"""Tests for the GetBreakdownsUseCase."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_breakdowns import GetBreakdownsUseCase
from src.infrastructure.sample_ledger import build_sample_ledger


def test_execute_groups_sample_ledger() -> None:
    snapshot = build_sample_ledger()
    use_case = GetBreakdownsUseCase(
        ledger_source=SimpleNamespace(load_snapshot=lambda: snapshot),
        logger=MagicMock(),
    )

    breakdowns = use_case.execute()

    categories = [item.category for item in breakdowns.expenses_by_category]
    assert categories == [
        "Housing",
        "Transportation",
        "Food",
        "Entertainment",
        "Shopping",
        "Healthcare",
        "Personal",
    ]
    assert breakdowns.expenses_by_category[0].amount == Decimal("1800")
    assert breakdowns.expense_split.essential == Decimal("3250")
    assert breakdowns.expense_split.discretionary == Decimal("700")
    assert [item.category for item in breakdowns.assets_by_category] == [
        "liquid",
        "retirement",
        "investment",
        "property",
    ]
    assert breakdowns.debts_by_interest_rate[0].name == "Credit Card"
