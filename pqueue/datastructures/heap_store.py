from __future__ import annotations
from typing import Generic, Iterator, List, Optional, TypeVar

from .dynamic_array import DynamicArray

T = TypeVar("T")


class HeapStore(Generic[T]):
    """Array view of a complete binary tree.

    Position 0 is the root; the children of position `i` live at `2i + 1` and
    `2i + 2`. Only positions `[0, size)` are live. Callers are expected to pass
    valid positions; out-of-range access surfaces as the array's IndexError.
    """

    __slots__ = ("_data",)

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._data: DynamicArray[T] = DynamicArray(capacity)

    @staticmethod
    def parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def right(i: int) -> int:
        return 2 * i + 2

    def get(self, i: int) -> T:
        return self._data[i]

    def set(self, i: int, value: T) -> None:
        self._data[i] = value

    def append(self, value: T) -> None:
        self._data.append(value)

    def remove_last(self) -> T:
        """Drop the element at the last live position and return it."""
        return self._data.pop()

    def size(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def to_py(self) -> List[T]:
        return self._data.to_py()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"HeapStore({self.to_py()!r})"
