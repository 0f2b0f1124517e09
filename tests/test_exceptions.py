"""Tests for the exception hierarchy."""

from ledger_api.core.exceptions import ConfigurationError, LedgerError, StorageError


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        assert isinstance(LedgerError("test"), Exception)

    def test_configuration_error_is_ledger_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LedgerError)

    def test_storage_error_is_ledger_error(self) -> None:
        assert isinstance(StorageError("test"), LedgerError)

    def test_configuration_error_keeps_field_errors(self) -> None:
        err = ConfigurationError("Invalid environment variables.", [{"loc": ("PORT",)}])

        assert str(err) == "Invalid environment variables."
        assert err.errors == [{"loc": ("PORT",)}]

    def test_configuration_error_defaults_to_no_field_errors(self) -> None:
        assert ConfigurationError("boom").errors == []
