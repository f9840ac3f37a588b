"""JSON serialization of per-owner aggregates.

Each owner's collection is stored as one value. Account identifiers are
written as single-key objects naming their variant, e.g.
``{"onchain": {"owner": "...", "subaccount": null}}`` or
``{"offchain": "IBAN ..."}``.
"""

import json
from typing import Any, Optional

from dtrack.domain.models import (
    AccountIdentifier,
    AccountKind,
    CustomTransaction,
    LabeledAccount,
    OffChainAccount,
    OnChainAccount,
    TransactionLabelRecord,
    UserPreferences,
)


def _dumps(data: Any) -> bytes:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _loads(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


# Account identifiers


def account_to_dict(account: AccountIdentifier) -> dict:
    """Serialize an AccountIdentifier to its tagged form."""
    if isinstance(account, OnChainAccount):
        return {
            AccountKind.ONCHAIN.value: {
                "owner": account.owner,
                "subaccount": account.subaccount.hex() if account.subaccount is not None else None,
            }
        }
    if isinstance(account, OffChainAccount):
        return {AccountKind.OFFCHAIN.value: account.address}
    raise TypeError(f"Unsupported account identifier: {account!r}")


def account_from_dict(data: dict) -> AccountIdentifier:
    """Deserialize an AccountIdentifier from its tagged form."""
    if len(data) != 1:
        raise ValueError(f"Account identifier must have exactly one variant: {data!r}")
    (tag, value), = data.items()
    kind = AccountKind(tag)
    if kind is AccountKind.ONCHAIN:
        subaccount = value.get("subaccount")
        return OnChainAccount(
            owner=value["owner"],
            subaccount=bytes.fromhex(subaccount) if subaccount is not None else None,
        )
    return OffChainAccount(address=value)


def _optional_account_to_dict(account: Optional[AccountIdentifier]) -> Optional[dict]:
    return account_to_dict(account) if account is not None else None


def _optional_account_from_dict(data: Optional[dict]) -> Optional[AccountIdentifier]:
    return account_from_dict(data) if data is not None else None


# Labeled accounts


def encode_accounts(accounts: list[LabeledAccount]) -> bytes:
    return _dumps({
        "accounts": [
            {
                "account": account_to_dict(a.account),
                "label": a.label,
                "product": a.product,
            }
            for a in accounts
        ]
    })


def decode_accounts(raw: bytes) -> list[LabeledAccount]:
    return [
        LabeledAccount(
            account=account_from_dict(item["account"]),
            label=item["label"],
            product=item.get("product"),
        )
        for item in _loads(raw)["accounts"]
    ]


# Transaction labels


def encode_transaction_labels(records: list[TransactionLabelRecord]) -> bytes:
    return _dumps({
        "labels": [{"id": r.transaction_id, "label": r.label} for r in records]
    })


def decode_transaction_labels(raw: bytes) -> list[TransactionLabelRecord]:
    return [
        TransactionLabelRecord(transaction_id=item["id"], label=item["label"])
        for item in _loads(raw)["labels"]
    ]


# Custom transactions


def encode_custom_transactions(transactions: list[CustomTransaction]) -> bytes:
    return _dumps({
        "transactions": [
            {
                "id": t.id,
                "timestamp_ms": t.timestamp_ms,
                "label": t.label,
                "amount": t.amount,
                "account": _optional_account_to_dict(t.account),
            }
            for t in transactions
        ]
    })


def decode_custom_transactions(raw: bytes) -> list[CustomTransaction]:
    return [
        CustomTransaction(
            id=item["id"],
            timestamp_ms=item["timestamp_ms"],
            label=item["label"],
            amount=item["amount"],
            account=_optional_account_from_dict(item.get("account")),
        )
        for item in _loads(raw)["transactions"]
    ]


# Taxonomy lists (labels, products)


def encode_string_list(values: list[str]) -> bytes:
    return _dumps(list(values))


def decode_string_list(raw: bytes) -> list[str]:
    return [str(v) for v in _loads(raw)]


# Preferences


def encode_preferences(prefs: UserPreferences) -> bytes:
    return _dumps({
        "default_currency": prefs.default_currency.value,
        "timezone": prefs.timezone,
        "notification_enabled": prefs.notification_enabled,
        "polling_interval_seconds": prefs.polling_interval_seconds,
        "theme": prefs.theme.value,
    })


def decode_preferences(raw: bytes) -> UserPreferences:
    return UserPreferences(**_loads(raw))
