import pytest

from dsakit.dynamic_array import DEFAULT_CAPACITY, DynamicArray


def test_add_first_reverses_order():
    arr = DynamicArray()
    for value in (10, 20, 30):
        arr.add_first(value)
    assert list(arr) == [30, 20, 10]
    assert len(arr) == 3


def test_capacity_doubles_when_full():
    arr = DynamicArray()
    for value in range(DEFAULT_CAPACITY):
        arr.add_last(value)
    assert arr.capacity() == DEFAULT_CAPACITY
    arr.add_last(-1)
    assert arr.capacity() == 2 * DEFAULT_CAPACITY
    assert list(arr) == list(range(DEFAULT_CAPACITY)) + [-1]


def test_zero_capacity_still_grows():
    arr = DynamicArray(0)
    arr.add_last("a")
    arr.add_last("b")
    assert list(arr) == ["a", "b"]
    assert arr.capacity() >= len(arr)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_insert_in_middle_and_ends():
    arr = DynamicArray(2)
    arr.add_last(1)
    arr.add_last(3)
    arr.insert(1, 2)
    arr.insert(0, 0)
    arr.insert(len(arr), 4)
    assert list(arr) == [0, 1, 2, 3, 4]


def test_insert_out_of_range():
    arr = DynamicArray()
    arr.add_last(1)
    with pytest.raises(IndexError):
        arr.insert(5, 2)
    with pytest.raises(IndexError):
        arr.insert(-1, 2)


def test_remove_first_and_last():
    arr = DynamicArray()
    for value in (1, 2, 3):
        arr.add_last(value)
    assert arr.remove_first() == 1
    assert arr.remove_last() == 3
    assert list(arr) == [2]


def test_remove_first_on_empty_is_noop():
    arr = DynamicArray()
    assert arr.remove_first() is None
    assert len(arr) == 0


def test_remove_last_on_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().remove_last()


def test_remove_at():
    arr = DynamicArray()
    for value in "abcd":
        arr.add_last(value)
    assert arr.remove_at(1) == "b"
    assert list(arr) == ["a", "c", "d"]
    with pytest.raises(IndexError):
        arr.remove_at(3)
    assert DynamicArray().remove_at(0) is None


def test_front_back_and_empty_errors():
    arr = DynamicArray()
    with pytest.raises(IndexError):
        arr.front()
    with pytest.raises(IndexError):
        arr.back()
    arr.add_last(7)
    arr.add_last(8)
    assert arr.front() == 7
    assert arr.back() == 8


def test_contains():
    arr = DynamicArray()
    arr.add_last(4)
    assert 4 in arr
    assert 5 not in arr


def test_clear_keeps_capacity():
    arr = DynamicArray(3)
    for value in range(5):
        arr.add_last(value)
    cap = arr.capacity()
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity() == cap


def test_shrink_to_fit_then_grow():
    arr = DynamicArray()
    for value in range(3):
        arr.add_last(value)
    arr.shrink_to_fit()
    assert arr.capacity() == len(arr)
    arr.add_last(3)
    assert arr.capacity() == 2 * 3
    assert list(arr) == [0, 1, 2, 3]


def test_str_separates_with_two_spaces():
    arr = DynamicArray()
    for value in (1, 2, 3):
        arr.add_last(value)
    assert str(arr) == "1  2  3"