"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings

ENV_VARS = (
    "LEDGER_FILE",
    "LEDGER_SAMPLE_DATA",
    "EMERGENCY_FUND_MULTIPLIER",
    "PROJECTION_MAX_MONTHS",
    "EXPECTED_ANNUAL_RETURN",
)


@pytest.fixture
def fake_logger(monkeypatch, tmp_path: Path) -> MagicMock:
    logger = MagicMock()
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    return logger


def test_from_env_defaults(fake_logger) -> None:
    """Without environment variables the defaults apply."""
    settings = DashboardSettings.from_env()

    assert settings.ledger_file is None
    assert settings.sample_data is False
    assert settings.emergency_fund_multiplier == Decimal("3")
    assert settings.max_projection_months == 600
    assert settings.expected_annual_return == Decimal("7")
    fake_logger.warning.assert_not_called()


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path, fake_logger) -> None:
    """File paths should resolve to Path instances."""
    ledger = tmp_path / "ledger.json"
    ledger.write_text("{}")
    monkeypatch.setenv("LEDGER_FILE", str(ledger))

    settings = DashboardSettings.from_env()

    assert settings.ledger_file == ledger.resolve()
    fake_logger.warning.assert_not_called()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path, fake_logger) -> None:
    ledger = tmp_path / "my ledger.json"
    ledger.write_text("{}")
    monkeypatch.setenv("LEDGER_FILE", ledger.as_uri())

    settings = DashboardSettings.from_env()

    assert settings.ledger_file == ledger.resolve()


def test_from_env_warns_on_missing_file(monkeypatch, tmp_path: Path, fake_logger) -> None:
    monkeypatch.setenv("LEDGER_FILE", str(tmp_path / "missing.json"))

    settings = DashboardSettings.from_env()

    assert isinstance(settings.ledger_file, Path)
    fake_logger.warning.assert_called_once()


def test_default_ledger_file_from_data_dir(tmp_path: Path, fake_logger) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "household.json").write_text("{}")

    settings = DashboardSettings.from_env()

    assert settings.ledger_file == (data_dir / "household.json").resolve()


def test_default_ledger_file_ambiguous(tmp_path: Path, fake_logger) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}")
    (data_dir / "b.json").write_text("{}")

    settings = DashboardSettings.from_env()

    assert settings.ledger_file is None
    fake_logger.warning.assert_called_once()


def test_from_env_reads_numeric_overrides(monkeypatch, fake_logger) -> None:
    monkeypatch.setenv("LEDGER_SAMPLE_DATA", "Yes")
    monkeypatch.setenv("EMERGENCY_FUND_MULTIPLIER", "0.5")
    monkeypatch.setenv("PROJECTION_MAX_MONTHS", "120")
    monkeypatch.setenv("EXPECTED_ANNUAL_RETURN", "0")

    settings = DashboardSettings.from_env()

    assert settings.sample_data is True
    assert settings.emergency_fund_multiplier == Decimal("0.5")
    assert settings.max_projection_months == 120
    assert settings.expected_annual_return == Decimal("0")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("EMERGENCY_FUND_MULTIPLIER", "three"),
        ("EMERGENCY_FUND_MULTIPLIER", "0"),
        ("PROJECTION_MAX_MONTHS", "-4"),
        ("PROJECTION_MAX_MONTHS", "ten"),
        ("EXPECTED_ANNUAL_RETURN", "-2"),
    ],
)
def test_from_env_falls_back_on_invalid_values(
    monkeypatch,
    fake_logger,
    name: str,
    value: str,
) -> None:
    monkeypatch.setenv(name, value)

    settings = DashboardSettings.from_env()

    assert settings == DashboardSettings()
    fake_logger.warning.assert_called_once()
