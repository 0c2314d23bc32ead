from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A growable, zero-indexed array backed by a raw ctypes buffer.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity grows geometrically (x2) when full, so `append` is amortized O(1).
    • Capacity never shrinks; `pop` and `clear` only release references.
    • Negative indices are normalized (like built-in list semantics).
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Smallest buffer ever allocated.
    _INITIAL_CAPACITY = 4

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None or capacity < self._INITIAL_CAPACITY:
            capacity = self._INITIAL_CAPACITY
        self._capacity = capacity
        self._buf = self._make_array(self._capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live items into a fresh buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("DynamicArray grew from %d to %d slots", self._capacity, new_capacity)
        self._buf = new_buf
        self._capacity = new_capacity

    def _grow_if_full(self) -> None:
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)

    def _normalize_index(self, idx: int) -> int:
        """Map negative indices and validate bounds against the live size."""
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots (always >= len(self))."""
        return self._capacity

    def append(self, value: T) -> None:
        """Append `value` at position `len(self)`. Amortized O(1)."""
        self._grow_if_full()
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Drop and return the last element. O(1).

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        val = self._buf[self._size]
        # Release the reference held by the now-dead slot.
        self._buf[self._size] = None
        return val  # type: ignore[return-value]

    def insert(self, idx: int, value: T) -> None:
        """Insert `value` before position `idx`, shifting the tail right. O(n - idx).

        `idx == len(self)` appends.
        """
        if idx < 0 or idx > self._size:
            raise IndexError("array index out of range")
        self._grow_if_full()
        for j in range(self._size, idx, -1):
            self._buf[j] = self._buf[j - 1]
        self._buf[idx] = value
        self._size += 1

    def remove_at(self, idx: int) -> T:
        """Remove and return the item at `idx`, shifting the tail left. O(n - idx)."""
        i = self._normalize_index(idx)
        val = self._buf[i]
        for j in range(i, self._size - 1):
            self._buf[j] = self._buf[j + 1]
        self._buf[self._size - 1] = None
        self._size -= 1
        return val  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove all items. Keeps capacity to avoid churn on re-use."""
        for i in range(self._size):
            self._buf[i] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._normalize_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._normalize_index(idx)] = value

    def to_py(self) -> List[T]:
        """Convert to a plain Python `list`."""
        return [self._buf[i] for i in range(self._size)]

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({self.to_py()!r})"
