"""Ratio helpers with an explicit zero-denominator policy."""

from decimal import Decimal
from logging import Logger

from src.domain.errors import ZeroDenominatorError
from src.domain.policies.zero_denominator import ZeroDenominatorPolicy
from src.utils.decimal_utils import coerce_decimal


def safe_ratio(
    numerator,
    denominator,
    policy: ZeroDenominatorPolicy = ZeroDenominatorPolicy.ZERO,
    *,
    logger: Logger | None = None,
    label: str = "ratio",
) -> Decimal | None:
    """Divide two amounts, applying the policy on a zero denominator.

    Args:
        numerator: Dividend.
        denominator: Divisor.
        policy: Result to produce when the divisor is zero.
        logger: Optional logger notified whenever the policy is applied.
        label: Metric name used in log and error messages.

    Returns:
        Decimal | None: The ratio, zero, or None depending on the policy.

    Raises:
        ZeroDenominatorError: If the divisor is zero and policy is RAISE.
    """
    top = coerce_decimal(numerator)
    bottom = coerce_decimal(denominator)
    if bottom != 0:
        return top / bottom
    if logger is not None:
        logger.debug(
            f"Zero denominator for {label}; applying policy={policy.value}"
        )
    if policy is ZeroDenominatorPolicy.RAISE:
        raise ZeroDenominatorError(f"{label} is undefined for a zero denominator")
    if policy is ZeroDenominatorPolicy.NONE:
        return None
    return Decimal("0")


__all__ = ["ZeroDenominatorPolicy", "safe_ratio"]
