import pytest

from pqueue.datastructures import HashMap


def test_hash_map_set_get_resize():
    m = HashMap(capacity=4, load_factor=0.75)
    for i in range(50):
        m.set(f"k{i}", i)
    for i in range(50):
        assert m.get(f"k{i}") == i
    assert len(m) == 50
    assert sorted(m.values()) == list(range(50))


def test_hash_map_update_does_not_grow():
    m = HashMap()
    m.set("a", 1)
    m.set("a", 2)
    assert len(m) == 1
    assert m.get("a") == 2


def test_hash_map_delete():
    m = HashMap()
    m.set("a", 1)
    assert m.delete("a") is True
    assert m.get("a") is None
    assert m.delete("a") is False
    assert len(m) == 0


def test_contains_is_presence_not_value():
    m = HashMap()
    m.set("none", None)
    assert m.contains("none")
    assert "none" in m
    assert not m.contains("other")


def test_equal_keys_share_an_entry():
    m = HashMap()
    m.set(1, "int")
    m.set(1.0, "float")
    assert len(m) == 1
    assert m.get(1) == "float"


def test_clear_and_items():
    m = HashMap()
    for k in range(20):
        m.set(k, k * k)
    assert dict(m.items()) == {k: k * k for k in range(20)}
    m.clear()
    assert len(m) == 0
    assert list(m.keys()) == []
    m.set("x", 1)
    assert m.get("x") == 1


def test_invalid_load_factor():
    with pytest.raises(ValueError):
        HashMap(load_factor=1.0)
    with pytest.raises(ValueError):
        HashMap(load_factor=0.05)


def test_key_unequal_to_itself_is_found_by_identity():
    nan = float("nan")
    m = HashMap()
    m.set(nan, "x")
    assert m.contains(nan)
    assert m.get(nan) == "x"
    m.set(nan, "y")
    assert len(m) == 1
    assert m.delete(nan) is True
    assert len(m) == 0
