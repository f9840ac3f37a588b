"""Account identifier variants and the LabeledAccount domain model."""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class OnChainAccount:
    """
    Ledger account descriptor: owning principal plus optional subaccount.

    Equality is structural, so two descriptors naming the same owner and
    subaccount bytes are the same account.
    """

    owner: str
    subaccount: Optional[bytes] = None

    def __post_init__(self) -> None:
        if isinstance(self.subaccount, (bytearray, memoryview)):
            object.__setattr__(self, "subaccount", bytes(self.subaccount))

    def __str__(self) -> str:
        if self.subaccount is None:
            return self.owner
        return f"{self.owner}.{self.subaccount.hex()}"


@dataclass(frozen=True)
class OffChainAccount:
    """Free-form off-chain address (bank account, exchange handle, ...)."""

    address: str

    def __str__(self) -> str:
        return self.address


AccountIdentifier = Union[OnChainAccount, OffChainAccount]


@dataclass
class LabeledAccount:
    """
    An account tracked by one owner, with a display label.

    Invariants enforced by the repository: ``account`` is unique within the
    owner's collection and an owner holds at most 20 entries.
    """

    account: AccountIdentifier
    label: str
    product: Optional[str] = field(default=None)
