"""Pydantic schemas for API request/response."""

from dtrack.api.schemas.account import (
    OnChainAccountSchema,
    OffChainAccountSchema,
    AccountIdentifierSchema,
    AccountReference,
    LabeledAccountCreate,
    LabeledAccountUpdate,
    LabeledAccountResponse,
)
from dtrack.api.schemas.transaction import (
    TransactionLabelSet,
    TransactionLabelResponse,
    CustomTransactionRequest,
    CustomTransactionResponse,
    CustomTransactionCreated,
)
from dtrack.api.schemas.taxonomy import (
    LabelRequest,
    ProductRequest,
    PreferencesSchema,
)

__all__ = [
    "OnChainAccountSchema",
    "OffChainAccountSchema",
    "AccountIdentifierSchema",
    "AccountReference",
    "LabeledAccountCreate",
    "LabeledAccountUpdate",
    "LabeledAccountResponse",
    "TransactionLabelSet",
    "TransactionLabelResponse",
    "CustomTransactionRequest",
    "CustomTransactionResponse",
    "CustomTransactionCreated",
    "LabelRequest",
    "ProductRequest",
    "PreferencesSchema",
]
