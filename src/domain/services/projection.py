"""Forward projections for net worth and savings goals."""

from collections.abc import Iterator
from decimal import Decimal

from src.domain.constants import DEFAULT_MAX_PROJECTION_MONTHS, MONTHS_PER_YEAR
from src.domain.models.finance import GoalEstimate, ProjectionPoint
from src.utils.decimal_utils import coerce_decimal

ONE = Decimal("1")
HUNDRED = Decimal("100")


def _growth_factor(annual_rate_percent) -> Decimal:
    factor = ONE + coerce_decimal(annual_rate_percent) / HUNDRED
    if factor <= 0:
        raise ValueError(
            f"Annual rate must be above -100%: {annual_rate_percent}"
        )
    return factor


def monthly_rate(annual_rate_percent) -> Decimal:
    """Return the monthly rate that compounds to the given annual rate.

    Args:
        annual_rate_percent: Annual growth rate in percent (7 means 7%).

    Returns:
        Decimal: Effective monthly rate as a fraction.
    """
    return _growth_factor(annual_rate_percent) ** (ONE / MONTHS_PER_YEAR) - ONE


class NetWorthProjection:
    """Lazy month-by-month balance projection.

    Iterating yields ``horizon_months + 1`` points starting at month 0.
    Each iteration recomputes from the start, so the projection can be
    consumed any number of times.
    """

    def __init__(
        self,
        starting_value,
        monthly_contribution,
        annual_rate_percent,
        horizon_months: int,
    ) -> None:
        if horizon_months < 0:
            raise ValueError(f"Horizon must not be negative: {horizon_months}")
        self.starting_value = coerce_decimal(starting_value)
        self.monthly_contribution = coerce_decimal(monthly_contribution)
        self.horizon_months = horizon_months
        self._growth = ONE + monthly_rate(annual_rate_percent)

    def __iter__(self) -> Iterator[ProjectionPoint]:
        value = self.starting_value
        for month in range(self.horizon_months + 1):
            yield ProjectionPoint(month=month, value=value)
            value = value * self._growth + self.monthly_contribution

    def __len__(self) -> int:
        return self.horizon_months + 1

    @property
    def final_value(self) -> Decimal:
        """Return the balance at the end of the horizon."""
        last = self.starting_value
        for point in self:
            last = point.value
        return last


def project_net_worth(
    starting_value,
    monthly_contribution,
    annual_rate_percent,
    horizon_months: int,
) -> NetWorthProjection:
    """Project a balance under monthly compounding and contributions."""
    return NetWorthProjection(
        starting_value,
        monthly_contribution,
        annual_rate_percent,
        horizon_months,
    )


def project_annual_net_worth(
    starting_value,
    annual_contribution,
    annual_rate_percent,
    years: int,
) -> list[ProjectionPoint]:
    """Project a balance year by year with annual compounding.

    Points are indexed by year (0 to ``years``); the ``month`` field of each
    point holds the year number.
    """
    if years < 0:
        raise ValueError(f"Years must not be negative: {years}")
    growth = _growth_factor(annual_rate_percent)
    contribution = coerce_decimal(annual_contribution)
    value = coerce_decimal(starting_value)
    points = []
    for year in range(years + 1):
        points.append(ProjectionPoint(month=year, value=value))
        value = value * growth + contribution
    return points


def months_to_target(
    starting_value,
    target_value,
    monthly_contribution,
    annual_rate_percent,
    max_months: int = DEFAULT_MAX_PROJECTION_MONTHS,
) -> int:
    """Return the months needed for a balance to reach a target.

    Args:
        starting_value: Balance today.
        target_value: Balance to reach.
        monthly_contribution: Amount added at the end of each month.
        annual_rate_percent: Annual growth rate in percent.
        max_months: Hard cap on the search.

    Returns:
        int: 0 when the target is already met, otherwise the number of
        months, or ``max_months`` when the target is not reached within the
        cap. Treat the cap as "effectively never".
    """
    if max_months < 0:
        raise ValueError(f"Month cap must not be negative: {max_months}")
    value = coerce_decimal(starting_value)
    target = coerce_decimal(target_value)
    if value >= target:
        return 0
    growth = ONE + monthly_rate(annual_rate_percent)
    contribution = coerce_decimal(monthly_contribution)
    months = 0
    while value < target and months < max_months:
        value = value * growth + contribution
        months += 1
    return months


def estimate_time_to_target(
    starting_value,
    target_value,
    monthly_contribution,
    annual_rate_percent,
    max_months: int = DEFAULT_MAX_PROJECTION_MONTHS,
) -> GoalEstimate:
    """Return months_to_target with an explicit reachability flag."""
    months = months_to_target(
        starting_value,
        target_value,
        monthly_contribution,
        annual_rate_percent,
        max_months,
    )
    if months < max_months or coerce_decimal(starting_value) >= coerce_decimal(target_value):
        return GoalEstimate(months=months, reachable=True)
    final = project_net_worth(
        starting_value,
        monthly_contribution,
        annual_rate_percent,
        max_months,
    ).final_value
    return GoalEstimate(
        months=months,
        reachable=final >= coerce_decimal(target_value),
    )


__all__ = [
    "monthly_rate",
    "NetWorthProjection",
    "project_net_worth",
    "project_annual_net_worth",
    "months_to_target",
    "estimate_time_to_target",
]
