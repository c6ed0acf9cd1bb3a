import random

import pytest

from algokit.bst import BinarySearchTree


def _tree(*keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key)
    return tree


def _is_ordered(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.data <= low:
        return False
    if high is not None and node.data >= high:
        return False
    return _is_ordered(node.left, low, node.data) and _is_ordered(node.right, node.data, high)


def test_insert_gives_sorted_inorder():
    keys = [10, 5, 20, 8, 30]
    tree = _tree(*keys)
    assert tree.inorder() == sorted(keys)
    assert tree.root.data == 10


def test_search_finds_present_key():
    tree = _tree(10, 5, 20, 8, 30)
    found = tree.search(20)
    assert found.data == 20
    assert tree.search(99) is None
    assert 8 in tree
    assert 99 not in tree


def test_duplicate_insert_is_ignored():
    tree = _tree(10, 5, 20)
    assert tree.insert(5) is False
    assert tree.inorder() == [5, 10, 20]


def test_insert_reports_new_key():
    tree = BinarySearchTree()
    assert tree.insert(7) is True
    assert tree.root.data == 7


def test_delete_root_with_only_left_subtree():
    tree = _tree(50, 10, 40, 2, 30)
    assert tree.delete(50) is True
    assert tree.inorder() == [2, 10, 30, 40]
    assert tree.root.data == 40


def test_delete_missing_key_leaves_tree_unchanged():
    tree = _tree(10, 5, 20, 8, 30)
    assert tree.delete(99) is False
    assert tree.inorder() == [5, 8, 10, 20, 30]


def test_delete_only_node_empties_tree():
    tree = _tree(42)
    assert tree.delete(42) is True
    assert tree.root is None
    assert tree.height() == 0
    assert tree.inorder() == []


def test_delete_leaf():
    tree = _tree(10, 5, 20, 8, 30)
    tree.delete(8)
    assert tree.inorder() == [5, 10, 20, 30]
    assert 8 not in tree


def test_height_of_chain_equals_key_count():
    keys = [1, 2, 3, 4, 5]
    tree = _tree(*keys)
    assert tree.height() == len(keys)


def test_empty_height_is_zero():
    assert BinarySearchTree().height() == 0


def test_iteration_matches_inorder():
    tree = _tree(3, 1, 4, 15, 9, 2, 6)
    assert list(tree) == tree.inorder()


def test_random_inserts_and_deletes_keep_order():
    rng = random.Random(1234)
    keys = rng.sample(range(1000), 200)
    tree = _tree(*keys)
    remaining = set(keys)
    for key in rng.sample(keys, 120):
        assert tree.delete(key) is True
        remaining.discard(key)
        assert _is_ordered(tree.root)
    assert tree.inorder() == sorted(remaining)


@pytest.mark.parametrize("victim", [10, 5, 20])
def test_delete_inner_nodes(victim):
    keys = [10, 5, 20, 3, 7, 15, 25]
    tree = _tree(*keys)
    tree.delete(victim)
    assert tree.inorder() == sorted(k for k in keys if k != victim)
    assert _is_ordered(tree.root)