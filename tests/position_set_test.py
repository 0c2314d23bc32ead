import pytest

from pqueue.datastructures import PositionSet


def test_add_keeps_members_sorted_and_distinct():
    s = PositionSet()
    for i in (7, 2, 9, 2, 0, 7):
        s.add(i)
    assert list(s) == [0, 2, 7, 9]
    assert len(s) == 4
    assert s.last() == 9
    assert 7 in s
    assert 3 not in s


def test_discard():
    s = PositionSet()
    s.add(4)
    s.add(1)
    assert s.discard(4) is True
    assert s.discard(4) is False
    assert s.last() == 1
    assert s.discard(1) is True
    assert s.is_empty()


def test_last_on_empty_set():
    with pytest.raises(IndexError):
        PositionSet().last()
