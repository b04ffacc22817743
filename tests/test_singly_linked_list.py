import pytest

from dsakit.singly_linked_list import SinglyLinkedList


def test_worked_example():
    ll = SinglyLinkedList()
    ll.add_first(10)
    for value in (2, 5, 7):
        ll.add_last(value)
    ll.add_after(2, 9)
    ll.remove_first()
    ll.remove_last()
    ll.add_first(3)
    ll.add_last(8)
    assert list(ll) == [3, 2, 9, 5, 8]
    assert len(ll) == 5
    ll.clear()
    assert len(ll) == 0
    assert ll.is_empty()


def test_add_after_uses_last_occurrence():
    ll = SinglyLinkedList()
    for value in (1, 2, 1):
        ll.add_last(value)
    ll.add_after(1, 9)
    assert list(ll) == [1, 2, 1, 9]


def test_add_after_tail_moves_tail():
    ll = SinglyLinkedList()
    ll.add_last("a")
    ll.add_after("a", "b")
    ll.add_last("c")
    assert list(ll) == ["a", "b", "c"]


def test_add_after_missing_raises():
    ll = SinglyLinkedList()
    ll.add_last(1)
    with pytest.raises(ValueError):
        ll.add_after(42, 0)
    assert list(ll) == [1]


def test_remove_on_empty_is_noop():
    ll = SinglyLinkedList()
    ll.remove_first()
    ll.remove_last()
    assert ll.is_empty()
    assert len(ll) == 0


def test_remove_last_single_resets_tail():
    ll = SinglyLinkedList()
    ll.add_last(1)
    ll.remove_last()
    assert ll.is_empty()
    ll.add_last(2)
    assert list(ll) == [2]


def test_remove_first_single_resets_tail():
    ll = SinglyLinkedList()
    ll.add_first(1)
    ll.remove_first()
    ll.add_last(2)
    ll.add_first(0)
    assert list(ll) == [0, 2]


def test_contains():
    ll = SinglyLinkedList()
    ll.add_last(5)
    assert 5 in ll
    assert 6 not in ll


def test_str():
    ll = SinglyLinkedList()
    for value in (1, 2, 3):
        ll.add_last(value)
    assert str(ll) == "1 2 3"