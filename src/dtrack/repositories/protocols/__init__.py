"""Repository protocol definitions (interfaces)."""

from dtrack.repositories.protocols.persistent_store import PersistentStore

__all__ = [
    "PersistentStore",
]
