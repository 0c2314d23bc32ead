from __future__ import annotations
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from .hash_map import HashMap
from .position_set import PositionSet

T = TypeVar("T")


class PositionIndex(Generic[T]):
    """Maps each distinct value to the set of heap positions holding it.

    A thin wrapper around :class:`HashMap` whose values are :class:`PositionSet`
    instances. An entry exists exactly while its set is non-empty, so
    :meth:`contains` is a plain key lookup.
    """

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map: HashMap[T, PositionSet] = HashMap()

    def add_position(self, value: T, index: int) -> None:
        """Record that `index` now holds `value`."""
        positions = self._map.get(value)
        if positions is None:
            positions = PositionSet()
            self._map.set(value, positions)
        positions.add(index)

    def remove_position(self, value: T, index: int) -> None:
        """Forget that `index` holds `value`; drops the entry once it is empty."""
        positions = self._map.get(value)
        if positions is None:
            return
        positions.discard(index)
        if positions.is_empty():
            self._map.delete(value)

    def contains(self, value: T) -> bool:
        return self._map.contains(value)

    def any_position(self, value: T) -> Optional[int]:
        """Return one position holding `value` (the largest), or None if absent."""
        positions = self._map.get(value)
        if positions is None:
            return None
        return positions.last()

    def swap_positions(self, value_at_i: T, value_at_j: T, i: int, j: int) -> None:
        """Re-file positions after the values at `i` and `j` traded places.

        `value_at_i` and `value_at_j` are the values as they were before the swap.
        """
        if i == j or value_at_i is value_at_j or value_at_i == value_at_j:
            return
        set_i = self._map.get(value_at_i)
        set_j = self._map.get(value_at_j)
        # Both values are live, so neither set can be missing or emptied here.
        set_i.discard(i)
        set_i.add(j)
        set_j.discard(j)
        set_j.add(i)

    def positions(self, value: T) -> List[int]:
        """Ascending snapshot of the positions holding `value`."""
        found = self._map.get(value)
        return list(found) if found is not None else []

    def clear(self) -> None:
        self._map.clear()

    def __contains__(self, value: T) -> bool:  # pragma: no cover - trivial
        return self._map.contains(value)

    def __len__(self) -> int:
        """Number of distinct values currently indexed."""
        return len(self._map)

    def __iter__(self) -> Iterator[T]:  # pragma: no cover - simple
        return self._map.keys()

    def to_py(self) -> Dict[T, List[int]]:
        """Snapshot as a native ``{value: [positions...]}`` dict."""
        return {value: list(found) for value, found in self._map.items()}

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PositionIndex({self.to_py()!r})"
