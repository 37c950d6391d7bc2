"""Domain services for personal finance metrics."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from logging import Logger

from src.domain.constants import (
    DEFAULT_EMERGENCY_FUND_MULTIPLIER,
    LIQUID_ASSET_CATEGORIES,
    MONTHS_PER_YEAR,
)
from src.domain.models.finance import (
    AllocationAmounts,
    AllocationRecommendation,
    AllocationSplit,
    CategoryAmount,
    EmergencyFundProgress,
    ExpenseSplit,
)
from src.domain.models.ledger import Asset, Debt, Expense, IncomeSource
from src.domain.policies.allocation import RECOMMENDED_ALLOCATION
from src.domain.policies.zero_denominator import ZeroDenominatorPolicy
from src.domain.services.aggregation import group_sum, sum_amounts
from src.domain.services.normalization import normalize_category
from src.domain.services.ratios import safe_ratio
from src.utils.decimal_utils import coerce_decimal

HUNDRED = Decimal("100")
ALLOCATION_BUCKETS = ("needs", "wants", "savings")


def monthly_income(income: Sequence[IncomeSource]) -> Decimal:
    """Return total income normalized to a monthly figure."""
    return sum_amounts(
        income,
        amount_of=lambda source: source.amount,
        frequency_of=lambda source: source.frequency,
    )


def monthly_burn_rate(expenses: Sequence[Expense]) -> Decimal:
    """Return total spending normalized to a monthly figure."""
    return sum_amounts(
        expenses,
        amount_of=lambda expense: expense.amount,
        frequency_of=lambda expense: expense.frequency,
    )


def total_assets(assets: Sequence[Asset]) -> Decimal:
    """Return the sum of all asset values."""
    return sum_amounts(assets, amount_of=lambda asset: asset.value)


def total_debt(debts: Sequence[Debt]) -> Decimal:
    """Return the sum of all outstanding debt balances."""
    return sum_amounts(debts, amount_of=lambda debt: debt.balance)


def net_worth(assets: Sequence[Asset], debts: Sequence[Debt]) -> Decimal:
    """Return total assets minus total debt; negative values are valid."""
    return total_assets(assets) - total_debt(debts)


def savings_rate(
    income: Sequence[IncomeSource],
    expenses: Sequence[Expense],
    policy: ZeroDenominatorPolicy = ZeroDenominatorPolicy.ZERO,
    logger: Logger | None = None,
) -> Decimal | None:
    """Return the share of monthly income left after expenses.

    Args:
        income: Income ledger.
        expenses: Expense ledger.
        policy: Result for zero income (0 by default, None, or raise).
        logger: Optional logger notified when the policy is applied.

    Returns:
        Decimal | None: Savings rate as a percentage.
    """
    earned = monthly_income(income)
    ratio = safe_ratio(
        earned - monthly_burn_rate(expenses),
        earned,
        policy,
        logger=logger,
        label="savings rate",
    )
    return None if ratio is None else ratio * HUNDRED


def total_minimum_payments(debts: Sequence[Debt]) -> Decimal:
    """Return the sum of minimum monthly debt payments."""
    return sum_amounts(debts, amount_of=lambda debt: debt.minimum_payment)


def debt_to_income_ratio(
    debts: Sequence[Debt],
    income: Sequence[IncomeSource],
    policy: ZeroDenominatorPolicy = ZeroDenominatorPolicy.ZERO,
    logger: Logger | None = None,
) -> Decimal | None:
    """Return minimum monthly debt payments over monthly income.

    The result is a fraction (0.25 means a quarter of income goes to
    minimum payments). Zero income follows the same policy as savings_rate.
    """
    return safe_ratio(
        total_minimum_payments(debts),
        monthly_income(income),
        policy,
        logger=logger,
        label="debt-to-income ratio",
    )


def essential_vs_discretionary(expenses: Sequence[Expense]) -> ExpenseSplit:
    """Split monthly spending by the essential flag."""
    totals = group_sum(
        expenses,
        key_of=lambda expense: bool(expense.essential),
        amount_of=lambda expense: expense.amount,
        frequency_of=lambda expense: expense.frequency,
    )
    return ExpenseSplit(
        essential=totals.get(True, Decimal("0")),
        discretionary=totals.get(False, Decimal("0")),
    )


def expenses_by_category(expenses: Sequence[Expense]) -> list[CategoryAmount]:
    """Return monthly spending per expense category in first-seen order."""
    totals = group_sum(
        expenses,
        key_of=lambda expense: normalize_category(expense.category),
        amount_of=lambda expense: expense.amount,
        frequency_of=lambda expense: expense.frequency,
    )
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in totals.items()
    ]


def assets_by_category(assets: Sequence[Asset]) -> list[CategoryAmount]:
    """Return asset values per asset category in first-seen order."""
    totals = group_sum(
        assets,
        key_of=lambda asset: asset.category.value,
        amount_of=lambda asset: asset.value,
    )
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in totals.items()
    ]


def liquid_assets(assets: Sequence[Asset]) -> Decimal:
    """Return the value of liquid and investment assets."""
    return sum_amounts(
        assets,
        amount_of=lambda asset: asset.value,
        predicate=lambda asset: asset.category in LIQUID_ASSET_CATEGORIES,
    )


def emergency_fund_target(
    expenses: Sequence[Expense],
    multiplier=DEFAULT_EMERGENCY_FUND_MULTIPLIER,
) -> Decimal:
    """Return annual burn times the multiplier (3X by default)."""
    return monthly_burn_rate(expenses) * MONTHS_PER_YEAR * coerce_decimal(multiplier)


def emergency_fund_progress(
    assets: Sequence[Asset],
    expenses: Sequence[Expense],
    multiplier=DEFAULT_EMERGENCY_FUND_MULTIPLIER,
    logger: Logger | None = None,
) -> EmergencyFundProgress:
    """Compute progress toward the emergency fund goal.

    Args:
        assets: Asset ledger; only liquid and investment assets count.
        expenses: Expense ledger used to size the goal.
        multiplier: Years of expenses the fund should cover.
        logger: Optional logger notified for a zero target.

    Returns:
        EmergencyFundProgress: Current amount, target, percentage and
        shortfall. A zero target counts as fully funded.
    """
    current = liquid_assets(assets)
    target = emergency_fund_target(expenses, multiplier)
    if target == 0:
        if logger is not None:
            logger.debug("Emergency fund target is zero; reporting 100%")
        percent = HUNDRED if current >= 0 else Decimal("0")
    else:
        percent = current / target * HUNDRED
    return EmergencyFundProgress(
        current=current,
        target=target,
        percent_complete=percent,
        shortfall=max(Decimal("0"), target - current),
    )


def allocation_amounts(
    income_amount,
    split: AllocationSplit,
) -> AllocationAmounts:
    """Return the monthly dollar amount of each allocation bucket."""
    amount = coerce_decimal(income_amount)
    return AllocationAmounts(
        needs=amount * split.needs / HUNDRED,
        wants=amount * split.wants / HUNDRED,
        savings=amount * split.savings / HUNDRED,
    )


def recommended_allocation(
    income: Sequence[IncomeSource],
    expenses: Sequence[Expense],
    policy: ZeroDenominatorPolicy = ZeroDenominatorPolicy.ZERO,
    logger: Logger | None = None,
) -> AllocationRecommendation:
    """Return the 50/30/20 guideline next to the actual savings rate.

    The split is a fixed guideline; only the savings rate and the dollar
    amounts come from the ledgers.
    """
    split = RECOMMENDED_ALLOCATION
    rate = savings_rate(income, expenses, policy, logger=logger)
    return AllocationRecommendation(
        split=split,
        amounts=allocation_amounts(monthly_income(income), split),
        current_savings_rate=rate,
    )


def actual_allocation(
    income: Sequence[IncomeSource],
    expenses: Sequence[Expense],
) -> AllocationAmounts:
    """Return actual needs, wants and savings in monthly dollars.

    Needs are essential expenses, wants are discretionary expenses and
    savings is whatever income is left (negative when overspending).
    """
    split = essential_vs_discretionary(expenses)
    return AllocationAmounts(
        needs=split.essential,
        wants=split.discretionary,
        savings=monthly_income(income) - split.total,
    )


def rebalance_allocation(
    split: AllocationSplit,
    bucket: str,
    new_percent: int,
) -> AllocationSplit:
    """Set one bucket and spread the remainder over the other two.

    The other buckets keep their relative proportions (evenly when both
    are zero), rounded half up, and the three always total 100.

    Args:
        split: Current allocation.
        bucket: One of "needs", "wants" or "savings".
        new_percent: New whole percentage for the bucket, 0 to 100.

    Returns:
        AllocationSplit: The rebalanced allocation.

    Raises:
        ValueError: If the bucket is unknown or the percentage out of range.
    """
    if bucket not in ALLOCATION_BUCKETS:
        raise ValueError(f"Unknown allocation bucket: {bucket}")
    if not 0 <= new_percent <= 100:
        raise ValueError(f"Allocation percent must be within 0-100: {new_percent}")
    first, second = (name for name in ALLOCATION_BUCKETS if name != bucket)
    first_value = getattr(split, first)
    second_value = getattr(split, second)
    remaining = Decimal(100 - new_percent)
    pool = first_value + second_value
    share = Decimal(first_value) / pool if pool else Decimal("0.5")
    first_new = int(
        (remaining * share).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )
    values = {
        bucket: new_percent,
        first: first_new,
        second: 100 - new_percent - first_new,
    }
    return AllocationSplit(**values)


def debts_by_interest_rate(debts: Sequence[Debt]) -> list[Debt]:
    """Return debts ordered highest interest rate first (avalanche order)."""
    return sorted(debts, key=lambda debt: debt.interest_rate, reverse=True)


__all__ = [
    "monthly_income",
    "monthly_burn_rate",
    "total_assets",
    "total_debt",
    "net_worth",
    "savings_rate",
    "total_minimum_payments",
    "debt_to_income_ratio",
    "essential_vs_discretionary",
    "expenses_by_category",
    "assets_by_category",
    "liquid_assets",
    "emergency_fund_target",
    "emergency_fund_progress",
    "allocation_amounts",
    "recommended_allocation",
    "actual_allocation",
    "rebalance_allocation",
    "debts_by_interest_rate",
]
