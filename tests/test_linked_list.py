import pytest

from algokit.linked_list import SinglyLinkedList


def test_initial_items_keep_order():
    lst = SinglyLinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_insert_prepends():
    lst = SinglyLinkedList([1, 2])
    lst.insert(0)
    assert list(lst) == [0, 1, 2]
    assert lst.head() == 0
    assert lst.tail() == 2
    assert len(lst) == 3


def test_insert_into_empty():
    lst = SinglyLinkedList()
    assert len(lst) == 0
    for value in "xyz":
        lst.insert(value)
    assert list(lst) == ["z", "y", "x"]
    assert lst.head() == "z"
    assert lst.tail() == "x"


def test_contains():
    lst = SinglyLinkedList(["one", "two"])
    assert "two" in lst
    assert "three" not in lst


def test_empty_head_and_tail_raise():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.head()
    with pytest.raises(IndexError):
        lst.tail()


def test_single_item_is_head_and_tail():
    lst = SinglyLinkedList([42])
    assert lst.head() == lst.tail() == 42