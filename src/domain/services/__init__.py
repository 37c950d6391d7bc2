"""Domain services package."""

from .aggregation import group_sum, sum_amounts
from .finance import (
    actual_allocation,
    allocation_amounts,
    assets_by_category,
    debt_to_income_ratio,
    debts_by_interest_rate,
    emergency_fund_progress,
    emergency_fund_target,
    essential_vs_discretionary,
    expenses_by_category,
    liquid_assets,
    monthly_burn_rate,
    monthly_income,
    net_worth,
    rebalance_allocation,
    recommended_allocation,
    savings_rate,
    total_assets,
    total_debt,
    total_minimum_payments,
)
from .normalization import (
    monthly_equivalent,
    normalize_asset_category,
    normalize_category,
    normalize_frequency,
)
from .projection import (
    NetWorthProjection,
    estimate_time_to_target,
    monthly_rate,
    months_to_target,
    project_annual_net_worth,
    project_net_worth,
)
from .ratios import safe_ratio
from .validation import (
    validate_asset,
    validate_debt,
    validate_expense,
    validate_income,
    validate_unique_ids,
)

__all__ = [
    "group_sum",
    "sum_amounts",
    "actual_allocation",
    "allocation_amounts",
    "assets_by_category",
    "debt_to_income_ratio",
    "debts_by_interest_rate",
    "emergency_fund_progress",
    "emergency_fund_target",
    "essential_vs_discretionary",
    "expenses_by_category",
    "liquid_assets",
    "monthly_burn_rate",
    "monthly_income",
    "net_worth",
    "rebalance_allocation",
    "recommended_allocation",
    "savings_rate",
    "total_assets",
    "total_debt",
    "total_minimum_payments",
    "monthly_equivalent",
    "normalize_asset_category",
    "normalize_category",
    "normalize_frequency",
    "NetWorthProjection",
    "estimate_time_to_target",
    "monthly_rate",
    "months_to_target",
    "project_annual_net_worth",
    "project_net_worth",
    "safe_ratio",
    "validate_asset",
    "validate_debt",
    "validate_expense",
    "validate_income",
    "validate_unique_ids",
]
