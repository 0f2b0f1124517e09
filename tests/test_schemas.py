"""Tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from ledger_api.schemas.transaction import TransactionCreate, TransactionOut


class TestTransactionCreate:
    """Tests for the create payload."""

    def test_credit_keeps_sign(self) -> None:
        body = TransactionCreate(title="Salary", amount=5000, type="credit")

        assert body.signed_amount() == 5000

    def test_debit_is_negated(self) -> None:
        body = TransactionCreate(title="Rent", amount=2000, type="debit")

        assert body.signed_amount() == -2000

    def test_numeric_string_is_coerced(self) -> None:
        body = TransactionCreate.model_validate({"title": "T", "amount": "12.5", "type": "credit"})

        assert body.amount == 12.5

    @pytest.mark.parametrize("amount", ["abc", 0, -1, "nan", "inf", True, False])
    def test_rejects_bad_amount(self, amount) -> None:
        with pytest.raises(ValidationError):
            TransactionCreate.model_validate({"title": "T", "amount": amount, "type": "credit"})

    def test_collects_every_error(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            TransactionCreate.model_validate({"title": "", "amount": "x", "type": "gift"})

        fields = {err["loc"][0] for err in excinfo.value.errors()}
        assert fields == {"title", "amount", "type"}


class TestTransactionOut:
    """Tests for the response shape."""

    def test_optional_fields_default_to_none(self) -> None:
        out = TransactionOut(id="abc", title="T", amount=-3)

        assert out.model_dump() == {
            "id": "abc",
            "title": "T",
            "amount": -3,
            "session_id": None,
            "created_at": None,
        }
