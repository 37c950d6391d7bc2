"""Port for reading ledger snapshots."""

from typing import Protocol

from src.domain.models.ledger import LedgerSnapshot


class LedgerSourcePort(Protocol):
    """Port exposing read access to the four ledgers."""

    def load_snapshot(self) -> LedgerSnapshot:
        """Return an immutable snapshot of income, assets, debts, expenses."""


__all__ = ["LedgerSourcePort"]
