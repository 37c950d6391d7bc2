"""Composition root for wiring infrastructure adapters."""

from src.infrastructure.ledger_json import read_ledger_file
from src.infrastructure.ledger_store import InMemoryLedgerStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_ledger import build_sample_ledger
from src.infrastructure.settings import DashboardSettings


def build_settings() -> DashboardSettings:
    """Return settings sourced from the environment."""
    return DashboardSettings.from_env()


def build_ledger_store(
    settings: DashboardSettings | None = None,
) -> InMemoryLedgerStore:
    """Return a ledger store seeded from the configured source.

    The ledger file wins when it exists; otherwise the demo ledger is used
    when enabled, and an empty store is returned as a last resort.
    """
    resolved = settings or build_settings()
    logger = get_app_logger()
    if resolved.ledger_file is not None and resolved.ledger_file.exists():
        snapshot = read_ledger_file(resolved.ledger_file)
        logger.info(f"Loaded ledger from {resolved.ledger_file}")
        return InMemoryLedgerStore(snapshot, logger=logger)
    if resolved.sample_data:
        logger.info("Seeding ledger store with sample data")
        return InMemoryLedgerStore(build_sample_ledger(), logger=logger)
    return InMemoryLedgerStore(logger=logger)


__all__ = ["build_settings", "build_ledger_store"]
