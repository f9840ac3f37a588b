"""Pydantic schemas for transaction label and custom transaction endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from dtrack.api.schemas.account import AccountIdentifierSchema, account_to_schema
from dtrack.domain.models import MAX_U64, CustomTransaction, TransactionLabelRecord
from dtrack.services import CustomTransactionInput


class TransactionLabelSet(BaseModel):
    """Request schema for labeling an observed transaction."""

    transaction_id: int = Field(..., ge=0, le=MAX_U64)
    label: str


class TransactionLabelResponse(BaseModel):
    """Response schema for a transaction label."""

    transaction_id: int
    label: str

    @classmethod
    def from_domain(cls, record: TransactionLabelRecord) -> "TransactionLabelResponse":
        return cls(transaction_id=record.transaction_id, label=record.label)


class CustomTransactionRequest(BaseModel):
    """Request schema for creating or updating a custom transaction."""

    id: str = Field(default="", max_length=100, description="Leave blank to derive one from the clock")
    timestamp_ms: int = Field(..., ge=0, le=MAX_U64)
    label: str
    amount: int = Field(..., ge=0, le=MAX_U64)
    account: Optional[AccountIdentifierSchema] = None

    def to_input(self) -> CustomTransactionInput:
        return CustomTransactionInput(
            id=self.id,
            timestamp_ms=self.timestamp_ms,
            label=self.label,
            amount=self.amount,
            account=self.account.to_domain() if self.account else None,
        )


class CustomTransactionResponse(BaseModel):
    """Response schema for a custom transaction."""

    id: str
    timestamp_ms: int
    label: str
    amount: int
    account: Optional[AccountIdentifierSchema] = None

    @classmethod
    def from_domain(cls, txn: CustomTransaction) -> "CustomTransactionResponse":
        return cls(
            id=txn.id,
            timestamp_ms=txn.timestamp_ms,
            label=txn.label,
            amount=txn.amount,
            account=account_to_schema(txn.account) if txn.account is not None else None,
        )


class CustomTransactionCreated(BaseModel):
    """Response schema carrying the id of a new custom transaction."""

    id: str
