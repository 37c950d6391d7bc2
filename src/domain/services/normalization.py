"""Domain normalization helpers."""

from decimal import Decimal

from src.domain.constants import MONTHS_PER_YEAR, PERIODS_PER_YEAR, UNCATEGORIZED
from src.domain.errors import InvalidFrequencyError
from src.domain.models.ledger import AssetCategory, Frequency
from src.utils.decimal_utils import coerce_decimal


def normalize_frequency(frequency: Frequency | str) -> Frequency:
    """Coerce a raw frequency value to the Frequency enum.

    Args:
        frequency: Enum member or its string value (case-insensitive).

    Returns:
        Frequency: Matching enum member.

    Raises:
        InvalidFrequencyError: If the value is not a known frequency.
    """
    if isinstance(frequency, Frequency):
        return frequency
    if isinstance(frequency, str):
        cleaned = frequency.strip().lower()
        try:
            return Frequency(cleaned)
        except ValueError:
            pass
    raise InvalidFrequencyError(frequency)


def normalize_asset_category(category: AssetCategory | str | None) -> AssetCategory:
    """Coerce a raw asset category, mapping unknown values to OTHER."""
    if isinstance(category, AssetCategory):
        return category
    if not category:
        return AssetCategory.OTHER
    try:
        return AssetCategory(category.strip().lower())
    except ValueError:
        return AssetCategory.OTHER


def normalize_category(category: str | None) -> str:
    """Normalize an expense category label.

    Args:
        category: Raw category label.

    Returns:
        str: Stripped label, or "Uncategorized" when blank.
    """
    if not category:
        return UNCATEGORIZED
    cleaned = category.strip()
    return cleaned or UNCATEGORIZED


def monthly_equivalent(amount, frequency: Frequency | str) -> Decimal:
    """Convert a periodic amount to its monthly equivalent.

    Weekly amounts use 52/12 (not 4.33) so every caller agrees.

    Args:
        amount: Amount per period.
        frequency: Period the amount refers to.

    Returns:
        Decimal: Monthly-equivalent amount.

    Raises:
        InvalidFrequencyError: If the frequency is unknown.
    """
    resolved = normalize_frequency(frequency)
    value = coerce_decimal(amount)
    if resolved is Frequency.MONTHLY:
        return value
    return value * PERIODS_PER_YEAR[resolved] / MONTHS_PER_YEAR


__all__ = [
    "normalize_frequency",
    "normalize_asset_category",
    "normalize_category",
    "monthly_equivalent",
]
