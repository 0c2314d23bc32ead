from pqueue.datastructures import PriorityQueue
from tests.priority_queue_benchmark import index_size


def test_index_size_counts_position_buffers():
    single = PriorityQueue([1])
    # Five copies of one value push its PositionSet past the initial 4 slots.
    crowded = PriorityQueue([1] * 5)
    assert crowded._index._map.get(1)._items.capacity == 8
    assert index_size(crowded) > index_size(single)
    assert index_size(PriorityQueue()) > 0
