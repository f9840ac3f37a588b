"""Domain layer - pure business models with no external dependencies."""

from dtrack.domain.models import (
    IdentityKey,
    OnChainAccount,
    OffChainAccount,
    AccountIdentifier,
    LabeledAccount,
    TransactionLabelRecord,
    CustomTransaction,
    UserPreferences,
)

__all__ = [
    "IdentityKey",
    "OnChainAccount",
    "OffChainAccount",
    "AccountIdentifier",
    "LabeledAccount",
    "TransactionLabelRecord",
    "CustomTransaction",
    "UserPreferences",
]
