import threading

import pytest
from hypothesis import given, strategies as st

from bytelists.linked_list import ThreadSafeList


def _source_scenario():
    lst = ThreadSafeList()
    for index, value in enumerate([1, 2, 3, 4, 5, 6]):
        lst.insert(index, value)
    lst.insert(5, 3)
    return lst


def test_source_scenario_insert_and_retrieve():
    lst = _source_scenario()
    assert lst[5] == 3
    assert list(lst) == [1, 2, 3, 4, 5, 3, 6]


def test_source_scenario_iterate_reports_indices():
    lst = _source_scenario()
    seen = []
    lst.iterate(lambda item, index: seen.append((index, item)))
    assert seen == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 3), (6, 6)]


def test_source_scenario_change_and_delete():
    lst = _source_scenario()
    lst.transform(lambda value: value + 1)
    assert list(lst) == [2, 3, 4, 5, 6, 4, 7]
    assert lst.remove_first(lambda value: value == 4) is True
    assert list(lst) == [2, 3, 5, 6, 4, 7]
    assert len(lst) == 6


def test_remove_first_without_match():
    lst = ThreadSafeList([1, 2, 3])
    assert lst.remove_first(lambda value: value == 9) is False
    assert list(lst) == [1, 2, 3]


def test_any_match():
    lst = ThreadSafeList([1, 2, 3])
    assert lst.any_match(lambda value: value == 2) is True
    assert lst.any_match(lambda value: value > 10) is False
    assert ThreadSafeList().any_match(lambda value: True) is False


def test_insert_at_end_and_front():
    lst = ThreadSafeList([2])
    lst.insert(1, 3)
    lst.insert(0, 1)
    assert list(lst) == [1, 2, 3]


def test_insert_out_of_range():
    lst = ThreadSafeList([1])
    with pytest.raises(IndexError):
        lst.insert(2, 5)
    assert list(lst) == [1]


def test_getitem_out_of_range():
    lst = ThreadSafeList([1, 2])
    assert lst[1] == 2
    with pytest.raises(IndexError):
        lst[2]
    with pytest.raises(IndexError):
        lst[-1]
    assert list(lst) == [1, 2]


def test_delitem():
    lst = ThreadSafeList(["a", "b", "c"])
    del lst[1]
    assert list(lst) == ["a", "c"]
    with pytest.raises(IndexError):
        del lst[2]


def test_clear():
    lst = ThreadSafeList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_iteration_is_snapshot():
    lst = ThreadSafeList([1, 2])
    iterator = iter(lst)
    lst.insert(2, 3)
    assert list(iterator) == [1, 2]


def test_concurrent_inserts():
    lst = ThreadSafeList()

    def worker():
        for _ in range(200):
            lst.insert(0, 1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(lst) == 1600
    assert all(value == 1 for value in lst)


@given(st.lists(st.integers()), st.integers())
def test_insert_preserves_order(items, value):
    lst = ThreadSafeList(items)
    position = len(items) // 2
    lst.insert(position, value)
    assert list(lst) == items[:position] + [value] + items[position:]
    assert len(lst) == len(items) + 1


@given(st.lists(st.integers(min_value=0, max_value=5)))
def test_remove_first_removes_earliest(items):
    lst = ThreadSafeList(items)
    removed = lst.remove_first(lambda value: value == 3)
    assert removed == (3 in items)
    expected = list(items)
    if 3 in expected:
        expected.remove(3)
    assert list(lst) == expected