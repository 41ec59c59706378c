import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    SinglyLinkedList,
)

values_lists = st.lists(st.integers(-50, 50), max_size=12)


@given(values=values_lists)
def test_construct_keeps_order(values):
    singly = SinglyLinkedList(values)
    doubly = DoublyLinkedList(values)
    circular = CircularLinkedList(values)
    for lst in (singly, doubly, circular):
        assert list(lst) == values
        assert len(lst) == len(values)


@given(values=values_lists, data=st.data())
def test_insert_after_matches_list(values, data):
    position = data.draw(st.integers(0, len(values)))
    expected = values[:position] + [999] + values[position:]
    singly = SinglyLinkedList(values)
    doubly = DoublyLinkedList(values)
    circular = CircularLinkedList(values)
    for lst in (singly, doubly, circular):
        lst.insert_after(position, 999)
        assert list(lst) == expected
        assert len(lst) == len(expected)


@given(values=st.lists(st.integers(), min_size=1, max_size=12), data=st.data())
def test_delete_matches_list(values, data):
    position = data.draw(st.integers(1, len(values)))
    expected = values[: position - 1] + values[position:]
    singly = SinglyLinkedList(values)
    doubly = DoublyLinkedList(values)
    circular = CircularLinkedList(values)
    for lst in (singly, doubly, circular):
        removed = lst.delete(position)
        assert removed == values[position - 1]
        assert list(lst) == expected
        lst.append(7)
        assert list(lst) == expected + [7]


def test_positions_out_of_range():
    singly = SinglyLinkedList([1, 2, 3])
    doubly = DoublyLinkedList([1, 2, 3])
    circular = CircularLinkedList([1, 2, 3])
    for lst in (singly, doubly, circular):
        with pytest.raises(IndexError):
            lst.insert_after(4, 0)
        with pytest.raises(IndexError):
            lst.insert_after(-1, 0)
        with pytest.raises(IndexError):
            lst.delete(0)
        with pytest.raises(IndexError):
            lst.delete(4)
        assert list(lst) == [1, 2, 3]


@pytest.mark.parametrize("cls", [SinglyLinkedList, DoublyLinkedList])
@given(values=values_lists)
def test_reverse(cls, values):
    lst = cls(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.append(5)
    assert list(lst) == values[::-1] + [5]


def test_singly_search():
    lst = SinglyLinkedList([4, 8, 15, 8])
    assert lst.search(8) == 2
    assert lst.search(4) == 1
    assert lst.search(15) == 3
    assert lst.search(16) is None


def test_singly_search_finds_last_node():
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.search(3) == 3


@given(values=values_lists)
def test_doubly_reversed_iteration(values):
    lst = DoublyLinkedList(values)
    assert list(reversed(lst)) == values[::-1]
    lst.reverse()
    assert list(reversed(lst)) == values


def test_doubly_delete_keeps_back_links():
    lst = DoublyLinkedList([1, 2, 3, 4])
    lst.delete(4)
    lst.delete(1)
    assert list(reversed(lst)) == [3, 2]


def test_circular_prepend_and_append():
    lst = CircularLinkedList()
    lst.append(2)
    lst.prepend(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]


@given(values=st.lists(st.integers(), min_size=1, max_size=10))
def test_circular_pops(values):
    lst = CircularLinkedList(values)
    assert lst.pop_front() == values[0]
    assert list(lst) == values[1:]
    lst = CircularLinkedList(values)
    assert lst.pop_back() == values[-1]
    assert list(lst) == values[:-1]


def test_circular_pop_empty():
    lst = CircularLinkedList()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_circular_delete_after_middle_and_wrap():
    lst = CircularLinkedList([10, 20, 30])
    assert lst.delete_after(10) == 20
    assert list(lst) == [10, 30]
    assert lst.delete_after(30) == 10
    assert list(lst) == [30]


def test_circular_delete_after_single_empties():
    lst = CircularLinkedList([5])
    assert lst.delete_after(5) == 5
    assert list(lst) == []
    assert len(lst) == 0


def test_circular_delete_after_missing():
    lst = CircularLinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.delete_after(9)


def test_circular_clear():
    lst = CircularLinkedList([1, 2, 3])
    lst.clear()
    assert list(lst) == []
    lst.append(4)
    assert list(lst) == [4]