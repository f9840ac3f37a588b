"""Typed view of one persistent store partition."""

from typing import Callable, Generic, Iterator, Optional, TypeVar

from dtrack.domain.models import IdentityKey
from dtrack.repositories.protocols import PersistentStore

V = TypeVar("V")


class OwnerMap(Generic[V]):
    """Maps IdentityKey to a decoded aggregate, serializing on every write."""

    def __init__(
        self,
        store: PersistentStore,
        encode: Callable[[V], bytes],
        decode: Callable[[bytes], V],
    ):
        self._store = store
        self._encode = encode
        self._decode = decode

    def get(self, key: IdentityKey) -> Optional[V]:
        raw = self._store.get(key)
        return self._decode(raw) if raw is not None else None

    def insert(self, key: IdentityKey, value: V) -> None:
        self._store.insert(key, self._encode(value))

    def remove(self, key: IdentityKey) -> bool:
        """Remove the owner's entry; return True if one existed."""
        return self._store.remove(key) is not None

    def contains(self, key: IdentityKey) -> bool:
        return self._store.contains(key)

    def items(self) -> Iterator[tuple[IdentityKey, V]]:
        for key, raw in self._store.items():
            yield key, self._decode(raw)

    def __len__(self) -> int:
        return len(self._store)
