"""Repository layer - data access abstractions and implementations."""

from dtrack.repositories.protocols import PersistentStore
from dtrack.repositories.partitions import Partition
from dtrack.repositories.owner_map import OwnerMap
from dtrack.repositories.owner_repository import OwnerRepository

__all__ = [
    "PersistentStore",
    "Partition",
    "OwnerMap",
    "OwnerRepository",
]
