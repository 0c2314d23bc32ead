from .dynamic_array import DynamicArray
from .hash_map import HashMap
from .position_set import PositionSet
from .position_index import PositionIndex
from .heap_store import HeapStore
from .priority_queue import PriorityQueue

__all__ = [
    "DynamicArray",
    "HashMap",
    "PositionSet",
    "PositionIndex",
    "HeapStore",
    "PriorityQueue",
]
