from __future__ import annotations
import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class _Entry(Generic[K, V]):
    """A single chained (key, value) node in a bucket."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: K, value: V, next: Optional["_Entry[K, V]"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next


class HashMap(Generic[K, V]):
    """A separate-chaining hash table keyed on value equality.

    - Buckets are singly-linked chains of `_Entry`, created lazily.
    - Capacity is kept a power of two so bucket selection is a mask.
    - The table doubles and rehashes once `size / capacity` exceeds the load factor.
    """

    __slots__ = ("_cap", "_load", "_buckets", "_size")

    def __init__(self, capacity: int = 16, load_factor: float = 0.75) -> None:
        if not (0.1 <= load_factor < 1.0):
            raise ValueError("load_factor must be in [0.1, 1.0)")
        cap = 4
        while cap < capacity:
            cap *= 2
        self._cap: int = cap
        self._load: float = load_factor
        self._buckets: List[Optional[_Entry[K, V]]] = [None] * self._cap
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, key: K) -> int:
        return hash(key) & (self._cap - 1)

    # Identity before equality, so keys unequal to themselves (NaN) stay reachable.
    def _find(self, key: K) -> Optional[_Entry[K, V]]:
        node = self._buckets[self._bucket_index(key)]
        while node is not None:
            if node.key is key or node.key == key:
                return node
            node = node.next
        return None

    def _resize(self) -> None:
        """Double the capacity and relink every entry into its new bucket."""
        old_buckets = self._buckets
        self._cap *= 2
        self._buckets = [None] * self._cap
        for head in old_buckets:
            node = head
            while node is not None:
                nxt = node.next
                idx = self._bucket_index(node.key)
                node.next = self._buckets[idx]
                self._buckets[idx] = node
                node = nxt
        logger.debug("HashMap rehashed %d entries into %d buckets", self._size, self._cap)

    # -----------------------------
    # Core operations
    # -----------------------------
    def set(self, key: K, value: V) -> None:
        """Insert or update key-value pair."""
        node = self._find(key)
        if node is not None:
            node.value = value
            return
        idx = self._bucket_index(key)
        self._buckets[idx] = _Entry(key, value, self._buckets[idx])
        self._size += 1
        if self._size / self._cap > self._load:
            self._resize()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Retrieve value for key or return default."""
        node = self._find(key)
        return default if node is None else node.value

    def contains(self, key: K) -> bool:
        """Check if key exists in the map, whatever value it holds."""
        return self._find(key) is not None

    def delete(self, key: K) -> bool:
        """Unlink key if present; return True if something was removed."""
        idx = self._bucket_index(key)
        prev: Optional[_Entry[K, V]] = None
        node = self._buckets[idx]
        while node is not None:
            if node.key is key or node.key == key:
                if prev is None:
                    self._buckets[idx] = node.next
                else:
                    prev.next = node.next
                self._size -= 1
                return True
            prev, node = node, node.next
        return False

    def clear(self) -> None:
        """Drop every entry; the bucket array keeps its current size."""
        self._buckets = [None] * self._cap
        self._size = 0

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[K, V]]:
        for head in self._buckets:
            node = head
            while node is not None:
                yield (node.key, node.value)
                node = node.next

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{pairs}}})"
