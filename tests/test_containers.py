import random

import pytest

from graphquest.containers import Map, MapPair, MaxHeap, Set


def lower(a, b):
    return a < b


def same(a, b):
    return a == b


def test_heap_top_of_empty_is_none():
    assert MaxHeap().top() is None


def test_heap_pop_of_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_heap_top_is_highest_priority():
    heap = MaxHeap()
    heap.push("low", 1)
    heap.push("high", 9)
    heap.push("mid", 5)
    assert heap.top() == "high"
    assert len(heap) == 3


def test_heap_pops_in_descending_priority():
    rng = random.Random(7)
    priorities = [rng.randint(-50, 50) for _ in range(200)]
    heap = MaxHeap()
    for p in priorities:
        heap.push(p, p)
    popped = [heap.pop() for _ in range(len(priorities))]
    assert popped == sorted(priorities, reverse=True)
    assert len(heap) == 0
    assert heap.top() is None


def test_heap_interleaved_push_pop():
    heap = MaxHeap()
    heap.push("a", 3)
    heap.push("b", 8)
    assert heap.pop() == "b"
    heap.push("c", 5)
    heap.push("d", 1)
    assert [heap.pop(), heap.pop(), heap.pop()] == ["c", "a", "d"]


def test_heap_pop_returns_top():
    heap = MaxHeap()
    for name, p in [("x", 2), ("y", 4), ("z", 3)]:
        heap.push(name, p)
    while len(heap):
        expected = heap.top()
        assert heap.pop() == expected


def test_map_unsorted_keeps_insertion_order():
    m = Map(is_equal=same)
    for key in ["c", "a", "b"]:
        m.insert(key, key.upper())
    assert [p.key for p in m] == ["c", "a", "b"]
    assert [p.value for p in m] == ["C", "A", "B"]


def test_map_insert_ignores_duplicate():
    m = Map(is_equal=same)
    assert m.insert("k", 1) is True
    assert m.insert("k", 2) is False
    assert len(m) == 1
    assert m.search("k") == MapPair("k", 1)


def test_map_insert_multi_keeps_duplicates():
    m = Map(is_equal=same)
    m.insert_multi("k", 1)
    m.insert_multi("k", 2)
    assert [p.value for p in m] == [1, 2]
    assert m.remove("k").value == 1
    assert m.search("k").value == 2


def test_map_search_missing_is_none():
    assert Map(is_equal=same).search("nope") is None


def test_map_remove_missing_raises():
    m = Map(is_equal=same)
    m.insert("a", 1)
    with pytest.raises(KeyError):
        m.remove("b")
    assert len(m) == 1


def test_sorted_map_orders_keys():
    rng = random.Random(3)
    keys = rng.sample(range(1000), 50)
    m = Map(lower_than=lower)
    for key in keys:
        m.insert(key, str(key))
    assert [p.key for p in m] == sorted(keys)


def test_sorted_map_equality_from_order():
    m = Map(lower_than=lower)
    m.insert(5, "first")
    assert m.insert(5, "second") is False
    assert m.search(5).value == "first"


def test_sorted_multimap_is_stable_for_equal_keys():
    m = Map(lower_than=lambda a, b: a[0] < b[0])
    m.insert_multi((1, "a"), None)
    m.insert_multi((0, "b"), None)
    m.insert_multi((1, "c"), None)
    assert [p.key for p in m] == [(0, "b"), (1, "a"), (1, "c")]


def test_map_value_can_be_updated_through_search():
    m = Map(is_equal=same)
    m.insert("a", 1)
    m.search("a").value = 10
    assert m.search("a").value == 10


def test_map_clear():
    m = Map(is_equal=same)
    m.insert("a", 1)
    m.insert("b", 2)
    m.clear()
    assert len(m) == 0
    assert list(m) == []


def test_map_default_comparison_is_equality():
    m = Map()
    m.insert("a", 1)
    assert m.search("a").value == 1
    assert m.insert("a", 2) is False


def test_set_add_and_contains():
    s = Set(is_equal=same)
    assert s.add("x") is True
    assert s.add("x") is False
    assert "x" in s
    assert "y" not in s
    assert len(s) == 1


def test_set_remove_returns_stored_value():
    s = Set(is_equal=lambda a, b: a.lower() == b.lower())
    s.add("Hola")
    assert s.search("HOLA") == "Hola"
    assert s.remove("hola") == "Hola"
    assert len(s) == 0
    with pytest.raises(KeyError):
        s.remove("hola")


def test_sorted_set_iterates_in_order():
    s = Set(lower_than=lower)
    for value in [4, 1, 3, 1, 2]:
        s.add(value)
    assert list(s) == [1, 2, 3, 4]


def test_set_clear():
    s = Set(is_equal=same)
    s.add(1)
    s.clear()
    assert list(s) == []
    assert s.search(1) is None