"""Domain exceptions for the finance dashboard."""


class FinanceDashboardError(Exception):
    """Base class for dashboard errors."""


class InvalidFrequencyError(FinanceDashboardError, ValueError):
    """Raised when a periodic amount uses an unknown frequency."""

    def __init__(self, frequency) -> None:
        super().__init__(f"Unknown frequency: {frequency!r}")
        self.frequency = frequency


class ZeroDenominatorError(FinanceDashboardError, ZeroDivisionError):
    """Raised when a ratio is requested with a zero denominator."""


class LedgerValidationError(FinanceDashboardError, ValueError):
    """Raised when a ledger record violates its invariants."""


class LedgerRecordNotFoundError(FinanceDashboardError, KeyError):
    """Raised when an update or delete targets an unknown record id."""

    def __init__(self, ledger: str, record_id: str) -> None:
        super().__init__(f"No {ledger} record with id={record_id}")
        self.ledger = ledger
        self.record_id = record_id

    def __str__(self) -> str:
        return self.args[0]


class LedgerImportError(FinanceDashboardError, ValueError):
    """Raised when a ledger document cannot be parsed."""


__all__ = [
    "FinanceDashboardError",
    "InvalidFrequencyError",
    "ZeroDenominatorError",
    "LedgerValidationError",
    "LedgerRecordNotFoundError",
    "LedgerImportError",
]
