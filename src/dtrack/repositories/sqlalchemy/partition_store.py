"""SQLAlchemy implementation of PersistentStore."""

import logging
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from dtrack.core.exceptions import ValueTooLargeError
from dtrack.domain.models import IdentityKey
from dtrack.repositories.partitions import Partition
from dtrack.repositories.sqlalchemy.orm_models import PartitionEntryORM

logger = logging.getLogger(__name__)


class SqlAlchemyPartitionStore:
    """
    SQLAlchemy-backed partition of the persistent store.

    Writes are staged on the session and flushed; committing is left to the
    caller so several partitions can change in one transaction.
    """

    def __init__(self, db: Session, partition: Partition):
        self._db = db
        self._partition = partition

    @property
    def partition(self) -> Partition:
        return self._partition

    @property
    def max_value_size(self) -> int:
        return self._partition.max_value_size

    def get(self, key: IdentityKey) -> Optional[bytes]:
        """Return the stored value, or None."""
        row = self._find(key)
        return bytes(row.payload) if row else None

    def insert(self, key: IdentityKey, value: bytes) -> Optional[bytes]:
        """Store a value, returning the previous one if any."""
        if len(value) > self.max_value_size:
            logger.warning(
                "Rejected %d-byte write to %s for %s (limit %d)",
                len(value),
                self._partition.display_name,
                key,
                self.max_value_size,
            )
            raise ValueTooLargeError(self._partition.display_name, len(value), self.max_value_size)

        row = self._find(key)
        previous = None
        if row:
            previous = bytes(row.payload)
            row.payload = value
        else:
            self._db.add(PartitionEntryORM(
                partition_id=int(self._partition),
                owner_key=key,
                payload=value,
            ))
        self._db.flush()
        return previous

    def remove(self, key: IdentityKey) -> Optional[bytes]:
        """Remove a value, returning it if it existed."""
        row = self._find(key)
        if not row:
            return None
        previous = bytes(row.payload)
        self._db.delete(row)
        self._db.flush()
        return previous

    def contains(self, key: IdentityKey) -> bool:
        """Return True if a value is stored under key."""
        return self._find(key) is not None

    def items(self) -> Iterator[tuple[IdentityKey, bytes]]:
        """Iterate over all entries in key order."""
        rows = (
            self._db.query(PartitionEntryORM)
            .filter(PartitionEntryORM.partition_id == int(self._partition))
            .order_by(PartitionEntryORM.owner_key)
            .all()
        )
        for row in rows:
            yield IdentityKey(row.owner_key), bytes(row.payload)

    def __len__(self) -> int:
        return (
            self._db.query(PartitionEntryORM)
            .filter(PartitionEntryORM.partition_id == int(self._partition))
            .count()
        )

    def _find(self, key: IdentityKey) -> Optional[PartitionEntryORM]:
        return (
            self._db.query(PartitionEntryORM)
            .filter(
                PartitionEntryORM.partition_id == int(self._partition),
                PartitionEntryORM.owner_key == key,
            )
            .first()
        )
