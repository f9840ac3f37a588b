"""Persistent store protocol."""

from typing import Iterator, Optional, Protocol

from dtrack.domain.models import IdentityKey
from dtrack.repositories.partitions import Partition


class PersistentStore(Protocol):
    """
    Interface for one partition of the restart-durable key-value store.

    Values are opaque bytes. ``insert`` rejects values larger than the
    partition's declared bound.
    """

    @property
    def partition(self) -> Partition:
        """Partition this store reads and writes."""
        ...

    def get(self, key: IdentityKey) -> Optional[bytes]:
        """Return the stored value, or None."""
        ...

    def insert(self, key: IdentityKey, value: bytes) -> Optional[bytes]:
        """Store a value, returning the previous one if any."""
        ...

    def remove(self, key: IdentityKey) -> Optional[bytes]:
        """Remove a value, returning it if it existed."""
        ...

    def contains(self, key: IdentityKey) -> bool:
        """Return True if a value is stored under key."""
        ...

    def items(self) -> Iterator[tuple[IdentityKey, bytes]]:
        """Iterate over all entries in key order."""
        ...

    def __len__(self) -> int:
        ...
