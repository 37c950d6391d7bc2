"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a ledger record or adapter.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not numeric, or is NaN or infinite.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Expected a number, got {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize optional numeric values, keeping None and blanks as None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal"]
