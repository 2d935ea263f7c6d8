"""Associative array backed by a growable list of key/value slots."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .errors import NotFound, NullKeyError

K = TypeVar("K")
V = TypeVar("V")

# Number of slots a fresh store allocates.
DEFAULT_CAPACITY = 16


@dataclass
class _Pair(Generic[K, V]):
    key: K
    value: V


class KeyValueStore(Generic[K, V]):
    """Unordered map from unique keys to values.

    Entries live in the first `size()` slots of a backing list whose length
    is the capacity. The list doubles when an insert finds it full. Every
    lookup is a linear scan, so `get`, `set`, `has_key` and `remove` are
    O(n) in the number of live entries. Boards hold a handful of
    categories and items, which keeps this cheap.

    Position order (`get_at`, iteration) is insertion order until a
    `remove`, which moves the last entry into the vacated slot.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._pairs: list[_Pair[K, V] | None] = [None] * capacity
        self._size = 0

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def set(self, key: K, value: V) -> None:
        """Associate `value` with `key`, replacing any existing value.

        Size grows by one only when `key` is new.

        Raises:
            NullKeyError: if `key` is None
        """
        if key is None:
            raise NullKeyError()
        index = self._find(key)
        if index >= 0:
            self._pairs[index].value = value  # type: ignore[union-attr]
            return
        if self._size == len(self._pairs):
            self._expand()
        self._pairs[self._size] = _Pair(key, value)
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value for `key`.

        Raises:
            NotFound: if `key` is absent (or None)
        """
        index = self._find(key)
        if index < 0:
            raise NotFound(key)
        return self._pairs[index].value  # type: ignore[union-attr]

    def has_key(self, key: K) -> bool:
        return self._find(key) >= 0

    def remove(self, key: K) -> None:
        """Drop the entry for `key`; absent keys are ignored."""
        index = self._find(key)
        if index < 0:
            return
        last = self._size - 1
        self._pairs[index] = self._pairs[last]
        self._pairs[last] = None
        self._size = last

    def get_at(self, index: int) -> K:
        """Key stored at position `index` (0 <= index < size())."""
        return self._slot(index).key

    def item_at(self, index: int) -> tuple[K, V]:
        pair = self._slot(index)
        return pair.key, pair.value

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._pairs)

    def copy(self) -> KeyValueStore[K, V]:
        """Shallow copy: new slots, same key and value objects."""
        clone: KeyValueStore[K, V] = KeyValueStore(len(self._pairs))
        for key, value in self.items():
            clone._pairs[clone._size] = _Pair(key, value)
            clone._size += 1
        return clone

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def keys(self) -> list[K]:
        return [self.get_at(i) for i in range(self._size)]

    def values(self) -> list[V]:
        return [self.item_at(i)[1] for i in range(self._size)]

    def items(self) -> list[tuple[K, V]]:
        return [self.item_at(i) for i in range(self._size)]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __str__(self) -> str:
        body = ", ".join(f"{key}: {value}" for key, value in self.items())
        return "{" + body + "}"

    def __repr__(self) -> str:
        return f"KeyValueStore(size={self._size}, capacity={len(self._pairs)}, items={self.items()!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find(self, key: K) -> int:
        if key is None:
            return -1
        for i in range(self._size):
            if self._pairs[i].key == key:  # type: ignore[union-attr]
                return i
        return -1

    def _slot(self, index: int) -> _Pair[K, V]:
        if not 0 <= index < self._size:
            raise IndexError(f"position {index} out of range for size {self._size}")
        return self._pairs[index]  # type: ignore[return-value]

    def _expand(self) -> None:
        self._pairs.extend([None] * len(self._pairs))
