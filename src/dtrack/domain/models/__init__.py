"""Domain models package."""

from dtrack.domain.models.enums import AccountKind, Theme, Currency
from dtrack.domain.models.identity import IdentityKey, ANONYMOUS_IDENTITY
from dtrack.domain.models.limits import (
    MAX_LABEL_LENGTH,
    MAX_LABELED_ACCOUNTS,
    MAX_TAXONOMY_ENTRIES,
    MAX_U64,
)
from dtrack.domain.models.account import (
    OnChainAccount,
    OffChainAccount,
    AccountIdentifier,
    LabeledAccount,
)
from dtrack.domain.models.transaction import TransactionLabelRecord, CustomTransaction
from dtrack.domain.models.preferences import UserPreferences

__all__ = [
    "AccountKind",
    "Theme",
    "Currency",
    "IdentityKey",
    "ANONYMOUS_IDENTITY",
    "MAX_LABEL_LENGTH",
    "MAX_LABELED_ACCOUNTS",
    "MAX_TAXONOMY_ENTRIES",
    "MAX_U64",
    "OnChainAccount",
    "OffChainAccount",
    "AccountIdentifier",
    "LabeledAccount",
    "TransactionLabelRecord",
    "CustomTransaction",
    "UserPreferences",
]
