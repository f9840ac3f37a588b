"""Tracking service: validated entry points over the owner repository."""

import logging
from dataclasses import dataclass
from typing import Optional

from dtrack.domain.models import (
    AccountIdentifier,
    CustomTransaction,
    IdentityKey,
    LabeledAccount,
    TransactionLabelRecord,
    UserPreferences,
)
from dtrack.repositories import OwnerRepository
from dtrack.services.validation import (
    validate_label,
    validate_optional_label,
    validate_preferences,
    validate_u64,
)

logger = logging.getLogger(__name__)


@dataclass
class CustomTransactionInput:
    """Input data for creating or updating a custom transaction."""

    timestamp_ms: int
    label: str
    amount: int
    id: str = ""
    account: Optional[AccountIdentifier] = None


class TrackingService:
    """
    Service for one caller's tracked accounts, labels and custom transactions.

    Validates and normalizes payloads (labels are trimmed, length-checked)
    before handing them to the repository, so nothing invalid is persisted.
    """

    def __init__(self, repository: OwnerRepository):
        self._repository = repository

    # Labeled accounts

    def create_labeled_account(
        self,
        owner: IdentityKey,
        account: AccountIdentifier,
        label: str,
        product: Optional[str] = None,
    ) -> LabeledAccount:
        """
        Start tracking an account under a label.

        Returns the stored LabeledAccount, with label and product trimmed.
        """
        labeled = LabeledAccount(
            account=account,
            label=validate_label(label),
            product=validate_optional_label(product, "product"),
        )
        stored = self._repository.add_account(owner, labeled)
        logger.info("Added account %s for %s", account, owner)
        return stored

    def get_labeled_accounts(self, owner: IdentityKey) -> list[LabeledAccount]:
        return self._repository.get_accounts(owner)

    def update_labeled_account(
        self,
        owner: IdentityKey,
        account: AccountIdentifier,
        label: str,
    ) -> LabeledAccount:
        return self._repository.update_account(owner, account, validate_label(label))

    def delete_labeled_account(self, owner: IdentityKey, account: AccountIdentifier) -> None:
        self._repository.remove_account(owner, account)
        logger.info("Removed account %s for %s", account, owner)

    # Transaction labels

    def get_transaction_labels(self, owner: IdentityKey) -> list[TransactionLabelRecord]:
        return self._repository.get_transaction_labels(owner)

    def set_transaction_label(self, owner: IdentityKey, transaction_id: int, label: str) -> None:
        self._repository.set_transaction_label(
            owner,
            validate_u64(transaction_id, "transaction_id"),
            validate_label(label),
        )

    # Custom transactions

    def get_custom_transactions(self, owner: IdentityKey) -> list[CustomTransaction]:
        return self._repository.get_custom_transactions(owner)

    def create_custom_transaction(self, owner: IdentityKey, data: CustomTransactionInput) -> str:
        """Create a custom transaction and return its (possibly derived) id."""
        transaction_id = self._repository.create_custom_transaction(
            owner, self._to_transaction(data)
        )
        logger.info("Created custom transaction %s for %s", transaction_id, owner)
        return transaction_id

    def update_custom_transaction(self, owner: IdentityKey, data: CustomTransactionInput) -> None:
        self._repository.update_custom_transaction(owner, self._to_transaction(data))

    def delete_custom_transaction(self, owner: IdentityKey, transaction_id: str) -> None:
        self._repository.delete_custom_transaction(owner, transaction_id)

    # Labels and products

    def get_labels(self, owner: IdentityKey) -> list[str]:
        return self._repository.get_labels(owner)

    def add_label(self, owner: IdentityKey, label: str) -> None:
        self._repository.add_label(owner, validate_label(label))

    def get_products(self, owner: IdentityKey) -> list[str]:
        return self._repository.get_products(owner)

    def add_product(self, owner: IdentityKey, product: str) -> None:
        self._repository.add_product(owner, validate_label(product, "product"))

    def remove_product(self, owner: IdentityKey, product: str) -> None:
        self._repository.remove_product(owner, validate_label(product, "product"))

    # Preferences

    def get_preferences(self, owner: IdentityKey) -> UserPreferences:
        return self._repository.get_preferences(owner)

    def set_preferences(self, owner: IdentityKey, preferences: UserPreferences) -> UserPreferences:
        return self._repository.set_preferences(owner, validate_preferences(preferences))

    @staticmethod
    def _to_transaction(data: CustomTransactionInput) -> CustomTransaction:
        return CustomTransaction(
            id=data.id.strip(),
            timestamp_ms=validate_u64(data.timestamp_ms, "timestamp_ms"),
            label=validate_label(data.label),
            amount=validate_u64(data.amount, "amount"),
            account=data.account,
        )
