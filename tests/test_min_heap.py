import pytest

from dsakit.min_heap import MinHeap


def _is_heap(items):
    return all(items[(i - 1) // 2] <= items[i] for i in range(1, len(items)))


@pytest.fixture
def heap():
    h = MinHeap()
    for value in (10, 5, 20, 3, 15):
        h.insert(value)
    return h


def test_storage_order_after_inserts(heap):
    assert list(heap) == [3, 5, 20, 10, 15]


def test_extract_min_returns_smallest(heap):
    assert heap.extract_min() == 3
    assert heap.extract_min() == 5
    assert len(heap) == 3
    assert sorted(heap) == [10, 15, 20]
    assert _is_heap(list(heap))


def test_extract_all_is_sorted():
    values = [7, 2, 9, 2, 0, 11, -4, 6, 6, 1]
    h = MinHeap()
    for value in values:
        h.insert(value)
        assert _is_heap(list(h))
    out = [h.extract_min() for _ in range(len(values))]
    assert out == sorted(values)
    assert len(h) == 0


def test_extract_from_empty_raises():
    h = MinHeap()
    with pytest.raises(IndexError):
        h.extract_min()


def test_single_element_round_trip():
    h = MinHeap()
    h.insert(42)
    assert h.extract_min() == 42
    with pytest.raises(IndexError):
        h.extract_min()


def test_str_lists_storage_order(heap):
    assert str(heap).split() == [str(v) for v in heap]