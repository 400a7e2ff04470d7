import pytest

from algolab.doubly_linked_list import (
    DoublyLinkedList,
    EmptyListError,
    NodeNotFoundError,
)


def _consistent(linked):
    return list(reversed(linked)) == list(linked)[::-1] and len(list(linked)) == len(linked)


def test_constructor_keeps_order():
    values = [4, 8, 15, 16, 23, 42]
    linked = DoublyLinkedList(values)
    assert list(linked) == values
    assert list(reversed(linked)) == values[::-1]
    assert len(linked) == len(values)


def test_source_sequence_of_head_inserts():
    linked = DoublyLinkedList()
    for value in (2, 4, 6, 8):
        linked.insert_at_beginning(value)
    linked.insert_at_end(10)
    assert list(linked) == [8, 6, 4, 2, 10]
    assert _consistent(linked)


def test_insert_after_and_before():
    linked = DoublyLinkedList([1, 2, 3])
    linked.insert_after(2, 9)
    linked.insert_before(2, 7)
    assert list(linked) == [1, 7, 2, 9, 3]
    assert _consistent(linked)


def test_insert_at_edges_updates_both_ends():
    linked = DoublyLinkedList([1, 2])
    linked.insert_before(1, 0)
    linked.insert_after(2, 3)
    assert list(linked) == [0, 1, 2, 3]
    assert list(reversed(linked)) == [3, 2, 1, 0]


def test_insert_relative_errors():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().insert_after(1, 0)
    with pytest.raises(EmptyListError):
        DoublyLinkedList().insert_before(1, 0)
    linked = DoublyLinkedList([1])
    with pytest.raises(NodeNotFoundError):
        linked.insert_after(5, 0)
    with pytest.raises(NodeNotFoundError):
        linked.insert_before(5, 0)
    assert list(linked) == [1]


def test_delete_first_and_last():
    values = [1, 2, 3, 4]
    linked = DoublyLinkedList(values)
    assert linked.delete_first() == values[0]
    assert linked.delete_last() == values[-1]
    assert list(linked) == values[1:-1]
    assert _consistent(linked)


def test_delete_down_to_empty():
    linked = DoublyLinkedList([5])
    assert linked.delete_last() == 5
    assert list(linked) == []
    assert list(reversed(linked)) == []
    with pytest.raises(EmptyListError):
        linked.delete_first()
    with pytest.raises(EmptyListError):
        linked.delete_last()


def test_delete_after():
    linked = DoublyLinkedList([1, 2, 3, 4])
    assert linked.delete_after(2) == 3
    assert list(linked) == [1, 2, 4]
    assert linked.delete_after(2) == 4
    assert list(reversed(linked)) == [2, 1]


def test_delete_before():
    linked = DoublyLinkedList([1, 2, 3, 4])
    assert linked.delete_before(3) == 2
    assert list(linked) == [1, 3, 4]
    assert linked.delete_before(3) == 1
    assert list(reversed(linked)) == [4, 3]


def test_delete_relative_at_edges_raises():
    linked = DoublyLinkedList([1, 2])
    with pytest.raises(NodeNotFoundError):
        linked.delete_after(2)
    with pytest.raises(NodeNotFoundError):
        linked.delete_before(1)
    with pytest.raises(NodeNotFoundError):
        linked.delete_after(7)
    with pytest.raises(EmptyListError):
        DoublyLinkedList().delete_before(1)
    assert len(linked) == 2