import random

import pytest

from dsakit.bst import (
    BinarySearchTree,
    TreeNode,
    in_order,
    post_order,
    pre_order,
)

SAMPLE = [50, 30, 20, 40, 70, 60, 80]


def _letter_tree():
    d, e, f, g = (TreeNode(ch) for ch in "DEFG")
    b = TreeNode("B", d, e)
    c = TreeNode("C", f, g)
    return TreeNode("A", b, c)


def _is_bst(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.data < low:
        return False
    if high is not None and node.data >= high:
        return False
    return _is_bst(node.left, low, node.data) and _is_bst(node.right, node.data, high)


def test_traversals_of_hand_built_tree():
    root = _letter_tree()
    assert list(in_order(root)) == ["D", "B", "E", "A", "F", "C", "G"]
    assert list(pre_order(root))[0] == "A"
    assert list(post_order(root))[-1] == "A"
    assert sorted(pre_order(root)) == sorted(in_order(root))


def test_traversals_of_empty_tree():
    assert list(in_order(None)) == []
    assert list(pre_order(None)) == []
    assert list(post_order(None)) == []


def test_sample_tree_traversals():
    tree = BinarySearchTree(SAMPLE)
    assert tree.in_order() == sorted(SAMPLE)
    assert tree.pre_order() == [50, 30, 20, 40, 70, 60, 80]
    assert tree.post_order() == [20, 40, 30, 60, 80, 70, 50]
    assert len(tree) == len(SAMPLE)


def test_in_order_is_sorted_for_degenerate_insertions():
    values = [5, 6, 4, 7, 3, 8, 2, 9, 1, 10]
    tree = BinarySearchTree(values)
    assert tree.in_order() == sorted(values)
    assert tree.root.data == 5


def test_search():
    tree = BinarySearchTree(SAMPLE)
    assert 40 in tree
    assert 45 not in tree
    assert 1 not in BinarySearchTree()


def test_delete_root_with_two_children_uses_successor():
    tree = BinarySearchTree(SAMPLE)
    assert tree.delete(50) is True
    assert tree.root.data == 60
    assert tree.in_order() == sorted(v for v in SAMPLE if v != 50)
    assert 50 not in tree
    assert len(tree) == len(SAMPLE) - 1


@pytest.mark.parametrize("value", SAMPLE)
def test_delete_each_value(value):
    tree = BinarySearchTree(SAMPLE)
    assert tree.delete(value)
    assert tree.in_order() == sorted(v for v in SAMPLE if v != value)
    assert _is_bst(tree.root)


def test_delete_missing_value():
    tree = BinarySearchTree(SAMPLE)
    assert tree.delete(99) is False
    assert tree.in_order() == sorted(SAMPLE)
    assert BinarySearchTree().delete(1) is False


def test_delete_last_node_empties_tree():
    tree = BinarySearchTree([7])
    assert tree.delete(7)
    assert tree.root is None
    assert len(tree) == 0


def test_duplicates_ignored_by_default():
    tree = BinarySearchTree([5, 5, 3, 3])
    assert tree.in_order() == [3, 5]
    assert len(tree) == 2


def test_duplicates_kept_when_allowed():
    tree = BinarySearchTree([5, 5, 3, 5], allow_duplicates=True)
    assert tree.in_order() == [3, 5, 5, 5]
    assert len(tree) == 4
    assert tree.delete(5)
    assert tree.in_order() == [3, 5, 5]
    assert _is_bst(tree.root)


def test_minimum():
    assert BinarySearchTree(SAMPLE).minimum() == min(SAMPLE)
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_random_inserts_and_deletes_keep_invariant():
    rng = random.Random(1234)
    values = rng.sample(range(1000), 200)
    tree = BinarySearchTree(values)
    remaining = set(values)
    for value in rng.sample(values, 100):
        assert tree.delete(value)
        remaining.discard(value)
        assert _is_bst(tree.root)
    assert tree.in_order() == sorted(remaining)
    assert len(tree) == len(remaining)