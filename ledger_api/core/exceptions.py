"""Exception hierarchy for ledger-api."""


class LedgerError(Exception):
    """Base exception for all ledger-api errors."""


class ConfigurationError(LedgerError):
    """Raised when environment configuration is invalid or missing."""

    def __init__(self, message: str, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class StorageError(LedgerError):
    """Raised when a database operation fails outside a request."""
