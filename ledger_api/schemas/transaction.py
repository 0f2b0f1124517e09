from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TransactionType = Literal["credit", "debit"]


class TransactionCreate(BaseModel):
    title: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    type: TransactionType

    @field_validator("amount", mode="before")
    @classmethod
    def reject_bool_amount(cls, value):
        # bool is an int subclass and would coerce to 0.0/1.0
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        return value

    def signed_amount(self) -> float:
        """Amount as stored: credits positive, debits negated."""
        return self.amount if self.type == "credit" else -self.amount


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    amount: float
    session_id: str | None = None
    created_at: datetime | None = None


class TransactionListOut(BaseModel):
    transactions: list[TransactionOut]


class TransactionDetailOut(BaseModel):
    transaction: TransactionOut | None = None


class Summary(BaseModel):
    amount: float | None = None


class SummaryOut(BaseModel):
    summary: Summary
