"""Durable partitions, one per owner-scoped collection kind."""

from enum import IntEnum


class Partition(IntEnum):
    """
    Partition ids of the persistent store.

    Ids are stored with every row, so existing values must never be
    renumbered; new partitions take the next free id.
    """

    LABELED_ACCOUNTS = 0
    TRANSACTION_LABELS = 1
    CUSTOM_TRANSACTIONS = 2
    LABELS = 3
    PRODUCTS = 4
    PREFERENCES = 5

    @property
    def max_value_size(self) -> int:
        """Largest serialized value, in bytes, the partition accepts."""
        return _MAX_VALUE_SIZES[self]

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ")


_MAX_VALUE_SIZES = {
    Partition.LABELED_ACCOUNTS: 4096,
    Partition.TRANSACTION_LABELS: 4096,
    Partition.CUSTOM_TRANSACTIONS: 8192,
    Partition.LABELS: 4096,
    Partition.PRODUCTS: 4096,
    Partition.PREFERENCES: 1024,
}
