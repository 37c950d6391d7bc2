"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import (
    DEFAULT_ANNUAL_RETURN_PERCENT,
    DEFAULT_EMERGENCY_FUND_MULTIPLIER,
    DEFAULT_MAX_PROJECTION_MONTHS,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal
from src.utils.utils import get_project_root

TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for loading ledgers and sizing goals.

    Attributes:
        ledger_file: Optional path to a JSON ledger export.
        sample_data: Whether to seed the demo ledger when no file is set.
        emergency_fund_multiplier: Years of expenses the fund should cover.
        max_projection_months: Cap for goal-seeking projections.
        expected_annual_return: Default annual return in percent.
    """

    ledger_file: Optional[Path] = None
    sample_data: bool = False
    emergency_fund_multiplier: Decimal = DEFAULT_EMERGENCY_FUND_MULTIPLIER
    max_projection_months: int = DEFAULT_MAX_PROJECTION_MONTHS
    expected_annual_return: Decimal = DEFAULT_ANNUAL_RETURN_PERCENT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_ledger = os.getenv("LEDGER_FILE")
        if raw_ledger:
            ledger_file = cls._normalize_path(raw_ledger, logger=logger)
        else:
            ledger_file = cls._default_ledger_file(logger=logger)
        sample_data = (
            os.getenv("LEDGER_SAMPLE_DATA", "").strip().lower() in TRUTHY
        )
        multiplier = cls._read_decimal(
            "EMERGENCY_FUND_MULTIPLIER",
            DEFAULT_EMERGENCY_FUND_MULTIPLIER,
            logger=logger,
        )
        max_months = cls._read_int(
            "PROJECTION_MAX_MONTHS",
            DEFAULT_MAX_PROJECTION_MONTHS,
            logger=logger,
        )
        annual_return = cls._read_decimal(
            "EXPECTED_ANNUAL_RETURN",
            DEFAULT_ANNUAL_RETURN_PERCENT,
            logger=logger,
            allow_zero=True,
        )
        return cls(
            ledger_file=ledger_file,
            sample_data=sample_data,
            emergency_fund_multiplier=multiplier,
            max_projection_months=max_months,
            expected_annual_return=annual_return,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the ledger file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path

    @staticmethod
    def _default_ledger_file(logger) -> Path | None:
        """Return a default ledger path when exactly one is in data/.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single JSON ledger is found.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json ledgers found in data/. "
                "Set LEDGER_FILE to choose one."
            )
        return None

    @staticmethod
    def _read_decimal(
        name: str,
        default: Decimal,
        logger,
        allow_zero: bool = False,
    ) -> Decimal:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = coerce_decimal(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < 0 or (value == 0 and not allow_zero):
            logger.warning(f"Out of range {name}={raw!r}; using {default}")
            return default
        return value

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"Out of range {name}={raw!r}; using {default}")
            return default
        return value


__all__ = ["DashboardSettings"]
