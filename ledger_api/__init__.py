"""Session-scoped personal finance ledger API."""

__version__ = "0.1.0"
