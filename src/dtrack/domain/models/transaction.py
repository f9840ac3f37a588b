"""Transaction label and custom transaction domain models."""

from dataclasses import dataclass, field
from typing import Optional

from dtrack.domain.models.account import AccountIdentifier


@dataclass
class TransactionLabelRecord:
    """Label attached to an observed ledger transaction."""

    transaction_id: int
    label: str


@dataclass
class CustomTransaction:
    """
    User-authored transaction (cash payment, off-chain transfer, ...).

    A blank ``id`` asks the repository to derive one from the clock.
    ``amount`` is in the smallest unit of the tracked asset.
    """

    id: str
    timestamp_ms: int
    label: str
    amount: int
    account: Optional[AccountIdentifier] = field(default=None)
