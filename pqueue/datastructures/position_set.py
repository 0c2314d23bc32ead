from __future__ import annotations
from bisect import bisect_left
from typing import Iterator

from .dynamic_array import DynamicArray


class PositionSet:
    """Ordered set of non-negative integers kept sorted in a DynamicArray.

    Membership and insertion point are found by binary search; inserting or
    discarding shifts the tail, which is O(k) in the number of members. The
    sets held by a priority queue's index are as large as the number of
    duplicates of one value, so k is usually tiny.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: DynamicArray[int] = DynamicArray()

    def _locate(self, i: int) -> int:
        return bisect_left(self._items, i)

    def add(self, i: int) -> None:
        """Insert `i`; adding an existing member is a no-op."""
        pos = self._locate(i)
        if pos < len(self._items) and self._items[pos] == i:
            return
        self._items.insert(pos, i)

    def discard(self, i: int) -> bool:
        """Remove `i` if present; return True if it was a member."""
        pos = self._locate(i)
        if pos < len(self._items) and self._items[pos] == i:
            self._items.remove_at(pos)
            return True
        return False

    def last(self) -> int:
        """Return the largest member.

        Raises:
            IndexError: if the set is empty.
        """
        if not self._items:
            raise IndexError("last() on empty PositionSet")
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __contains__(self, i: int) -> bool:
        pos = self._locate(i)
        return pos < len(self._items) and self._items[pos] == i

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PositionSet({self._items.to_py()!r})"
