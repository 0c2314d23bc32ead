from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .heap_store import HeapStore
from .position_index import PositionIndex

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PriorityQueue(Generic[T]):
    """A binary min-heap with an index from each value to the positions holding it.

    Elements must be hashable and ordered by ``<``/``<=``; equal elements are
    interchangeable, so duplicates are allowed and :meth:`remove` takes out
    any one of them. The index makes :meth:`contains` O(1) and :meth:`remove`
    O(log n).

    ``PriorityQueue(elements)`` builds the heap bottom-up in O(n);
    :meth:`from_iterable` inserts one element at a time in O(n log n).
    ``None`` is reserved as the empty result of :meth:`peek` and :meth:`poll`
    and cannot be stored.
    """

    __slots__ = ("_heap", "_index")

    def __init__(self, it: Optional[Iterable[T]] = None, capacity: Optional[int] = None) -> None:
        items: List[T] = list(it) if it is not None else []
        if any(item is None for item in items):
            raise ValueError("cannot store None in a PriorityQueue")
        if capacity is None or capacity < len(items):
            capacity = len(items) or None

        self._heap: HeapStore[T] = HeapStore(capacity)
        self._index: PositionIndex[T] = PositionIndex()
        if items:
            self._heapify(items)

    @classmethod
    def from_iterable(cls, it: Iterable[T]) -> "PriorityQueue[T]":
        """Build a queue by adding elements one at a time (no size needed up front)."""
        pq: PriorityQueue[T] = cls()
        for item in it:
            pq.add(item)
        return pq

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _heapify(self, items: List[T]) -> None:
        """Store `items` as-is, then sink every internal node bottom-up in O(n)."""
        for i, item in enumerate(items):
            self._heap.append(item)
            self._index.add_position(item, i)
        for i in reversed(range(len(items) // 2)):
            self._sink(i)
        logger.debug("heapified %d elements", len(items))

    def _less(self, i: int, j: int) -> bool:
        return self._heap.get(i) < self._heap.get(j)

    def _swap(self, i: int, j: int) -> None:
        """Exchange positions `i` and `j` in the store and in the index together."""
        value_i = self._heap.get(i)
        value_j = self._heap.get(j)
        self._heap.set(i, value_j)
        self._heap.set(j, value_i)
        self._index.swap_positions(value_i, value_j, i, j)

    def _swim(self, k: int) -> int:
        """Move the element at `k` up while it is smaller than its parent; return where it stops."""
        parent = HeapStore.parent(k)
        while k > 0 and self._less(k, parent):
            self._swap(parent, k)
            k = parent
            parent = HeapStore.parent(k)
        return k

    def _sink(self, k: int) -> int:
        """Move the element at `k` down below its smaller child; return where it stops."""
        n = self._heap.size()
        while True:
            left = HeapStore.left(k)
            right = HeapStore.right(k)
            if left >= n:
                break
            # Ties go to the left child.
            smallest = left
            if right < n and self._less(right, left):
                smallest = right
            if not self._less(smallest, k):
                break
            self._swap(k, smallest)
            k = smallest
        return k

    def _remove_at(self, i: int) -> T:
        """Remove the element at position `i` and restore both invariants."""
        last = self._heap.size() - 1
        removed = self._heap.get(i)
        self._swap(i, last)

        self._heap.remove_last()
        self._index.remove_position(removed, last)

        if i == last:
            return removed

        # The tail element now at `i` may belong either above or below it.
        if self._sink(i) == i:
            self._swim(i)
        return removed

    # -----------------------------
    # Public API
    # -----------------------------
    def is_empty(self) -> bool:
        return self._heap.size() == 0

    def size(self) -> int:
        return self._heap.size()

    def clear(self) -> None:
        """Drop every element; the backing buffer keeps its capacity."""
        logger.debug("clearing %d elements", self._heap.size())
        self._heap.clear()
        self._index.clear()

    def peek(self) -> Optional[T]:
        """Return the smallest element without removing it, or None if empty (O(1))."""
        return self._heap.get(0) if self._heap.size() else None

    def poll(self) -> Optional[T]:
        """Remove and return the smallest element, or None if empty (O(log n))."""
        if self.is_empty():
            return None
        return self._remove_at(0)

    def add(self, elem: T) -> None:
        """Insert `elem` (O(log n)).

        Raises:
            ValueError: if `elem` is None.
            TypeError: if `elem` is unhashable or cannot be ordered against
                the elements it is compared with.

        The queue is left untouched whenever this raises.
        """
        if elem is None:
            raise ValueError("cannot store None in a PriorityQueue")
        hash(elem)
        pos = self._heap.size()
        self._heap.append(elem)
        self._index.add_position(elem, pos)
        try:
            self._swim(pos)
        except Exception:
            self._undo_add(elem, pos)
            raise

    def _undo_add(self, elem: T, pos: int) -> None:
        """Walk `elem` back down to `pos` after a failed swim, then drop it."""
        path = [pos]
        while path[-1] > 0:
            path.append(HeapStore.parent(path[-1]))
        # Ancestors that moved down are strictly greater, so the first hit is `elem`.
        k = next(step for step, p in enumerate(path) if self._heap.get(p) is elem)
        for step in range(k, 0, -1):
            self._swap(path[step - 1], path[step])
        self._index.remove_position(elem, pos)
        self._heap.remove_last()
        logger.debug("rolled back add of %r", elem)

    def contains(self, elem: Optional[T]) -> bool:
        """Index lookup only (O(1)); the heap array is never scanned."""
        if elem is None:
            return False
        return self._index.contains(elem)

    def remove(self, elem: Optional[T]) -> bool:
        """Remove one occurrence of `elem`; return False if there was none (O(log n))."""
        if elem is None:
            return False
        pos = self._index.any_position(elem)
        if pos is None:
            return False
        self._remove_at(pos)
        return True

    def drain(self) -> Iterator[T]:
        """Poll until empty, yielding elements in ascending order."""
        while not self.is_empty():
            yield self._remove_at(0)

    def is_min_heap(self, k: int = 0) -> bool:
        """Check the heap property for the subtree rooted at `k` (test oracle)."""
        n = self._heap.size()
        if k >= n:
            return True
        left = HeapStore.left(k)
        right = HeapStore.right(k)
        if left < n and not self._heap.get(k) <= self._heap.get(left):
            return False
        if right < n and not self._heap.get(k) <= self._heap.get(right):
            return False
        return self.is_min_heap(left) and self.is_min_heap(right)

    def to_list(self) -> List[T]:
        """Array-order snapshot (heap order, not sorted order)."""
        return self._heap.to_py()

    def __contains__(self, elem: object) -> bool:
        return self.contains(elem)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._heap.size()

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._heap.size() != 0

    def __iter__(self) -> Iterator[T]:  # pragma: no cover - simple
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._heap)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PriorityQueue({self._heap.to_py()!r})"

    __str__ = __repr__
