"""Per-owner repository over the persistent store partitions."""

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Callable, Iterator, Optional, TypeVar

from sqlalchemy.orm import Session

from dtrack.core.clock import Clock, epoch_seconds, now_ns
from dtrack.core.exceptions import (
    AlreadyExistsError,
    CapacityExceededError,
    NotFoundError,
    TransactionIdConflictError,
)
from dtrack.domain.models import (
    MAX_LABELED_ACCOUNTS,
    MAX_TAXONOMY_ENTRIES,
    AccountIdentifier,
    CustomTransaction,
    IdentityKey,
    LabeledAccount,
    TransactionLabelRecord,
    UserPreferences,
)
from dtrack.repositories import codec
from dtrack.repositories.owner_map import OwnerMap
from dtrack.repositories.partitions import Partition
from dtrack.repositories.sqlalchemy.partition_store import SqlAlchemyPartitionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

CUSTOM_TRANSACTION_ID_PREFIX = "C#"


def _index_of(items: list[T], predicate: Callable[[T], bool]) -> Optional[int]:
    for pos, item in enumerate(items):
        if predicate(item):
            return pos
    return None


class OwnerRepository:
    """
    Owner-scoped collections with capacity, uniqueness and cascade rules.

    Every collection kind lives in its own partition as one serialized value
    per owner. Each mutating method reads the whole value, checks its rules,
    writes the whole value back and commits once; a failed method rolls the
    session back and leaves every partition as it was.
    """

    def __init__(self, db: Session, clock: Clock = now_ns):
        self._db = db
        self._clock = clock

        self._accounts: OwnerMap[list[LabeledAccount]] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.LABELED_ACCOUNTS),
            codec.encode_accounts,
            codec.decode_accounts,
        )
        self._transaction_labels: OwnerMap[list[TransactionLabelRecord]] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.TRANSACTION_LABELS),
            codec.encode_transaction_labels,
            codec.decode_transaction_labels,
        )
        self._custom_transactions: OwnerMap[list[CustomTransaction]] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.CUSTOM_TRANSACTIONS),
            codec.encode_custom_transactions,
            codec.decode_custom_transactions,
        )
        self._labels: OwnerMap[list[str]] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.LABELS),
            codec.encode_string_list,
            codec.decode_string_list,
        )
        self._products: OwnerMap[list[str]] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.PRODUCTS),
            codec.encode_string_list,
            codec.decode_string_list,
        )
        self._preferences: OwnerMap[UserPreferences] = OwnerMap(
            SqlAlchemyPartitionStore(db, Partition.PREFERENCES),
            codec.encode_preferences,
            codec.decode_preferences,
        )

    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        try:
            yield
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    # Labeled accounts

    def get_accounts(self, owner: IdentityKey) -> list[LabeledAccount]:
        """List the owner's accounts in insertion order (empty if none)."""
        return self._accounts.get(owner) or []

    def get_account(
        self,
        owner: IdentityKey,
        account: AccountIdentifier,
    ) -> Optional[LabeledAccount]:
        """Retrieve one of the owner's accounts by identifier."""
        for labeled in self.get_accounts(owner):
            if labeled.account == account:
                return labeled
        return None

    def add_account(self, owner: IdentityKey, account: LabeledAccount) -> LabeledAccount:
        """Append an account; the identifier must be new and the list not full."""
        with self._unit_of_work():
            accounts = self._accounts.get(owner) or []
            if len(accounts) >= MAX_LABELED_ACCOUNTS:
                raise CapacityExceededError("labeled accounts", MAX_LABELED_ACCOUNTS)
            if any(a.account == account.account for a in accounts):
                raise AlreadyExistsError("Account", str(account.account))

            accounts.append(account)
            self._accounts.insert(owner, accounts)
        return account

    def update_account(
        self,
        owner: IdentityKey,
        account: AccountIdentifier,
        new_label: str,
    ) -> LabeledAccount:
        """Replace the label of an existing account, keeping its other fields."""
        with self._unit_of_work():
            accounts = self._accounts.get(owner)
            if not accounts:
                raise NotFoundError("Labeled accounts for owner", owner)
            pos = _index_of(accounts, lambda a: a.account == account)
            if pos is None:
                raise NotFoundError("Account", str(account))

            accounts[pos] = replace(accounts[pos], label=new_label)
            self._accounts.insert(owner, accounts)
        return accounts[pos]

    def remove_account(self, owner: IdentityKey, account: AccountIdentifier) -> None:
        """
        Remove an account.

        Any removal clears all of the owner's transaction labels. Removing
        the last account also drops the owner's custom transactions and the
        account entry itself.
        """
        with self._unit_of_work():
            accounts = self._accounts.get(owner)
            if not accounts:
                raise NotFoundError("Labeled accounts for owner", owner)
            pos = _index_of(accounts, lambda a: a.account == account)
            if pos is None:
                raise NotFoundError("Account", str(account))

            del accounts[pos]
            self._transaction_labels.remove(owner)

            if accounts:
                self._accounts.insert(owner, accounts)
            else:
                self._accounts.remove(owner)
                self._custom_transactions.remove(owner)
                logger.info("Removed last account of %s; cleared its custom transactions", owner)

    # Transaction labels

    def get_transaction_labels(self, owner: IdentityKey) -> list[TransactionLabelRecord]:
        return self._transaction_labels.get(owner) or []

    def set_transaction_label(self, owner: IdentityKey, transaction_id: int, label: str) -> None:
        """Set the label of a transaction, overwriting any earlier one."""
        with self._unit_of_work():
            records = self._transaction_labels.get(owner) or []
            pos = _index_of(records, lambda r: r.transaction_id == transaction_id)
            if pos is None:
                records.append(TransactionLabelRecord(transaction_id=transaction_id, label=label))
            else:
                records[pos].label = label
            self._transaction_labels.insert(owner, records)

    # Custom transactions

    def get_custom_transactions(self, owner: IdentityKey) -> list[CustomTransaction]:
        return self._custom_transactions.get(owner) or []

    def create_custom_transaction(self, owner: IdentityKey, transaction: CustomTransaction) -> str:
        """
        Append a custom transaction and return its id.

        A blank id becomes ``C#<epoch seconds>``. The id is not retried or
        suffixed on collision, so two blank-id creations within the same
        second fail the second time.
        """
        with self._unit_of_work():
            transactions = self._custom_transactions.get(owner) or []

            transaction_id = transaction.id.strip()
            if not transaction_id:
                transaction_id = f"{CUSTOM_TRANSACTION_ID_PREFIX}{epoch_seconds(self._clock())}"
                logger.debug("Derived custom transaction id %s for %s", transaction_id, owner)

            if any(t.id == transaction_id for t in transactions):
                raise TransactionIdConflictError(transaction_id)

            transactions.append(replace(transaction, id=transaction_id))
            self._custom_transactions.insert(owner, transactions)
        return transaction_id

    def update_custom_transaction(self, owner: IdentityKey, transaction: CustomTransaction) -> None:
        """Replace the stored transaction that has the same id."""
        with self._unit_of_work():
            transactions = self._custom_transactions.get(owner)
            if not transactions:
                raise NotFoundError("Custom transactions for owner", owner)
            pos = _index_of(transactions, lambda t: t.id == transaction.id)
            if pos is None:
                raise NotFoundError("Custom transaction", transaction.id)

            transactions[pos] = transaction
            self._custom_transactions.insert(owner, transactions)

    def delete_custom_transaction(self, owner: IdentityKey, transaction_id: str) -> None:
        """Delete a custom transaction; drop the owner's entry once empty."""
        with self._unit_of_work():
            transactions = self._custom_transactions.get(owner)
            if not transactions:
                raise NotFoundError("Custom transactions for owner", owner)
            pos = _index_of(transactions, lambda t: t.id == transaction_id)
            if pos is None:
                raise NotFoundError("Custom transaction", transaction_id)

            del transactions[pos]
            if transactions:
                self._custom_transactions.insert(owner, transactions)
            else:
                self._custom_transactions.remove(owner)

    # Labels and products

    def get_labels(self, owner: IdentityKey) -> list[str]:
        return self._labels.get(owner) or []

    def add_label(self, owner: IdentityKey, label: str) -> None:
        self._append_unique(self._labels, owner, label, "Label")

    def get_products(self, owner: IdentityKey) -> list[str]:
        return self._products.get(owner) or []

    def add_product(self, owner: IdentityKey, product: str) -> None:
        self._append_unique(self._products, owner, product, "Product")

    def remove_product(self, owner: IdentityKey, product: str) -> None:
        """Remove a product if present; absent products are not an error."""
        with self._unit_of_work():
            products = self._products.get(owner)
            if not products or product not in products:
                return
            products.remove(product)
            if products:
                self._products.insert(owner, products)
            else:
                self._products.remove(owner)

    def _append_unique(
        self,
        target: OwnerMap[list[str]],
        owner: IdentityKey,
        value: str,
        resource: str,
    ) -> None:
        with self._unit_of_work():
            values = target.get(owner) or []
            if len(values) >= MAX_TAXONOMY_ENTRIES:
                raise CapacityExceededError(f"{resource.lower()}s", MAX_TAXONOMY_ENTRIES)
            if value in values:
                raise AlreadyExistsError(resource, value)
            values.append(value)
            target.insert(owner, values)

    # Preferences

    def get_preferences(self, owner: IdentityKey) -> UserPreferences:
        """Return the owner's preferences, or defaults if never set."""
        return self._preferences.get(owner) or UserPreferences()

    def set_preferences(self, owner: IdentityKey, preferences: UserPreferences) -> UserPreferences:
        with self._unit_of_work():
            self._preferences.insert(owner, preferences)
        return preferences
