"""Summation helpers shared by the finance metrics."""

from collections.abc import Callable, Hashable, Iterable
from decimal import Decimal
from typing import TypeVar

from src.domain.models.ledger import Frequency
from src.domain.services.normalization import monthly_equivalent
from src.utils.decimal_utils import coerce_decimal

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _amount(
    record: T,
    amount_of: Callable[[T], object],
    frequency_of: Callable[[T], Frequency | str] | None,
) -> Decimal:
    if frequency_of is None:
        return coerce_decimal(amount_of(record))
    return monthly_equivalent(amount_of(record), frequency_of(record))


def sum_amounts(
    records: Iterable[T],
    amount_of: Callable[[T], object],
    frequency_of: Callable[[T], Frequency | str] | None = None,
    predicate: Callable[[T], bool] | None = None,
) -> Decimal:
    """Sum amounts across a ledger.

    Args:
        records: Ledger records to aggregate.
        amount_of: Extracts the amount from a record.
        frequency_of: Optional frequency extractor; when given, amounts are
            normalized to monthly equivalents before summing.
        predicate: Optional filter applied before summation.

    Returns:
        Decimal: Total amount, zero for an empty ledger.
    """
    total = Decimal("0")
    for record in records:
        if predicate is not None and not predicate(record):
            continue
        total += _amount(record, amount_of, frequency_of)
    return total


def group_sum(
    records: Iterable[T],
    key_of: Callable[[T], K],
    amount_of: Callable[[T], object],
    frequency_of: Callable[[T], Frequency | str] | None = None,
    predicate: Callable[[T], bool] | None = None,
) -> dict[K, Decimal]:
    """Sum amounts per key, keeping first-occurrence key order.

    Args:
        records: Ledger records to aggregate.
        key_of: Extracts the grouping key from a record.
        amount_of: Extracts the amount from a record.
        frequency_of: Optional frequency extractor for normalization.
        predicate: Optional filter applied before grouping.

    Returns:
        dict: Totals per key, empty for an empty ledger.
    """
    totals: dict[K, Decimal] = {}
    for record in records:
        if predicate is not None and not predicate(record):
            continue
        key = key_of(record)
        totals[key] = totals.get(key, Decimal("0")) + _amount(
            record,
            amount_of,
            frequency_of,
        )
    return totals


__all__ = ["sum_amounts", "group_sum"]
