import pytest

from dsakit.linked_list import LinkedList, Node, format_values, traverse


def test_demo_sequence():
    items = LinkedList()
    items.insert_at_head(3)
    items.insert_at_tail(5)
    items.insert_at(4, 1)
    assert items.format() == "3 -> 4 -> 5 -> nullptr"
    items.remove(4)
    assert list(items) == [3, 5]
    items.insert_at_tail(10)
    items.insert_at_tail(15)
    assert list(items) == [3, 5, 10, 15]
    assert 10 in items
    assert items.delete_at(2) == 10
    assert list(items) == [3, 5, 15]
    items.clear()
    assert items.format() == "List is empty."
    assert len(items) == 0


def test_constructor_keeps_order():
    items = LinkedList([1, 2, 3])
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_insert_at_head_prepends():
    items = LinkedList([2])
    items.insert_at_head(1)
    assert list(items) == [1, 2]


def test_insert_at_end_position():
    items = LinkedList([1, 2])
    items.insert_at(3, 2)
    assert list(items) == [1, 2, 3]


def test_insert_at_out_of_bounds():
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at(9, 3)
    assert list(items) == [1, 2]


def test_insert_at_negative():
    with pytest.raises(IndexError):
        LinkedList().insert_at(1, -1)


def test_remove_only_first_occurrence():
    items = LinkedList([1, 2, 1])
    items.remove(1)
    assert list(items) == [2, 1]


def test_remove_missing_value():
    items = LinkedList([1])
    with pytest.raises(ValueError):
        items.remove(5)


def test_remove_from_empty():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_delete_at_head():
    items = LinkedList([7, 8])
    assert items.delete_at(0) == 7
    assert list(items) == [8]


@pytest.mark.parametrize("position", [-1, 2, 5])
def test_delete_at_invalid(position):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.delete_at(position)
    assert list(items) == [1, 2]


def test_delete_at_empty():
    with pytest.raises(IndexError):
        LinkedList().delete_at(0)


def test_contains():
    items = LinkedList([4, 5])
    assert 5 in items
    assert 6 not in items


def test_traverse_node_chain():
    head = Node(2, Node(4, Node(5, Node(6, Node(7)))))
    assert list(traverse(head)) == [2, 4, 5, 6, 7]
    assert format_values(head) == "Values-> { 2, 4, 5, 6, 7, }"


def test_format_values_empty():
    assert format_values(None) == "Values-> { }"


def test_head_matches_iteration():
    items = LinkedList([1, 2, 3])
    assert list(traverse(items.head)) == list(items)