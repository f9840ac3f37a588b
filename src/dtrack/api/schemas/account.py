"""Pydantic schemas for labeled account endpoints."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from dtrack.domain.models import (
    AccountIdentifier,
    LabeledAccount,
    OffChainAccount,
    OnChainAccount,
)


class OnChainAccountSchema(BaseModel):
    """Ledger account: owner principal plus optional 32-byte subaccount (hex)."""

    kind: Literal["onchain"]
    owner: str = Field(..., min_length=1, max_length=63)
    subaccount: Optional[str] = Field(default=None, pattern=r"^[0-9a-fA-F]{64}$")

    def to_domain(self) -> OnChainAccount:
        return OnChainAccount(
            owner=self.owner,
            subaccount=bytes.fromhex(self.subaccount) if self.subaccount else None,
        )


class OffChainAccountSchema(BaseModel):
    """Free-form off-chain address."""

    kind: Literal["offchain"]
    address: str = Field(..., min_length=1, max_length=255)

    def to_domain(self) -> OffChainAccount:
        return OffChainAccount(address=self.address)


AccountIdentifierSchema = Annotated[
    Union[OnChainAccountSchema, OffChainAccountSchema],
    Field(discriminator="kind"),
]


def account_to_schema(account: AccountIdentifier) -> Union[OnChainAccountSchema, OffChainAccountSchema]:
    """Convert a domain AccountIdentifier to its API form."""
    if isinstance(account, OnChainAccount):
        return OnChainAccountSchema(
            kind="onchain",
            owner=account.owner,
            subaccount=account.subaccount.hex() if account.subaccount is not None else None,
        )
    if isinstance(account, OffChainAccount):
        return OffChainAccountSchema(kind="offchain", address=account.address)
    raise TypeError(f"Unsupported account identifier: {account!r}")


class LabeledAccountCreate(BaseModel):
    """Request schema for tracking a new account."""

    account: AccountIdentifierSchema
    label: str = Field(..., description="Display label, 1-100 characters after trimming")
    product: Optional[str] = Field(default=None, description="Optional product the account belongs to")


class LabeledAccountUpdate(BaseModel):
    """Request schema for relabeling an account."""

    account: AccountIdentifierSchema
    label: str


class AccountReference(BaseModel):
    """Request schema naming an account to delete."""

    account: AccountIdentifierSchema


class LabeledAccountResponse(BaseModel):
    """Response schema for a labeled account."""

    account: AccountIdentifierSchema
    label: str
    product: Optional[str] = None

    @classmethod
    def from_domain(cls, labeled: LabeledAccount) -> "LabeledAccountResponse":
        return cls(
            account=account_to_schema(labeled.account),
            label=labeled.label,
            product=labeled.product,
        )
