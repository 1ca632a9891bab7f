import random

import pytest

from treekit.advanced import is_bst, levelorder
from treekit.avl import array_to_avl, avl_insert, avl_remove, sorted_array_to_avl
from treekit.tree import balance, inorder, size


def _nodes(root):
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(c for c in (node.left, node.right) if c is not None)


def _links_ok(root):
    if root is None:
        return True
    if root.parent is not None:
        return False
    return all(
        child.parent is node
        for node in _nodes(root)
        for child in (node.left, node.right)
        if child is not None
    )


def _balanced(root):
    return all(abs(balance(node)) <= 1 for node in _nodes(root))


def test_insert_into_empty_returns_same_node_twice():
    root, node = avl_insert(None, 42)
    assert root is node
    assert node.value == 42
    assert node.parent is None


def test_insert_returns_node_holding_value():
    root, _ = avl_insert(None, 10)
    root, node = avl_insert(root, 20)
    assert node.value == 20
    assert node.parent is root


def test_insert_duplicate_raises():
    root = array_to_avl([5, 3, 8])
    with pytest.raises(ValueError):
        avl_insert(root, 3)
    assert list(inorder(root)) == [3, 5, 8]


def test_ascending_inserts_stay_balanced():
    values = list(range(1, 33))
    root = array_to_avl(values)
    assert list(inorder(root)) == values
    assert _balanced(root)
    assert _links_ok(root)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_inserts_keep_avl_invariants(seed):
    rng = random.Random(seed)
    values = rng.sample(range(1000), 60)
    root = None
    for value in values:
        root, node = avl_insert(root, value)
        assert node.value == value
        assert _balanced(root)
        assert _links_ok(root)
    assert list(inorder(root)) == sorted(values)
    assert is_bst(root)


def test_array_to_avl_skips_duplicates():
    values = [4, 2, 4, 7, 2, 9]
    root = array_to_avl(values)
    assert list(inorder(root)) == sorted(set(values))
    assert size(root) == len(set(values))


def test_array_to_avl_empty():
    assert array_to_avl([]) is None


def test_remove_from_empty():
    assert avl_remove(None, 3) is None


def test_remove_single_node_leaves_empty_tree():
    root = array_to_avl([7])
    assert avl_remove(root, 7) is None


def test_remove_absent_value_changes_nothing():
    values = [50, 30, 70, 20, 40, 60, 80]
    root = array_to_avl(values)
    before = list(levelorder(root))
    after_root = avl_remove(root, 55)
    assert after_root is root
    assert list(levelorder(after_root)) == before


def test_remove_leaf_triggers_rotation():
    root = array_to_avl([2, 1, 3, 4])
    root = avl_remove(root, 1)
    assert list(inorder(root)) == [2, 3, 4]
    assert _balanced(root)
    assert _links_ok(root)


def test_remove_root_with_two_children():
    values = list(range(1, 8))
    root = array_to_avl(values)
    old_root_value = root.value
    root = avl_remove(root, old_root_value)
    assert list(inorder(root)) == [v for v in values if v != old_root_value]
    assert _links_ok(root)
    assert is_bst(root)


def test_remove_node_with_only_left_child():
    root = array_to_avl([10, 5, 15, 3])
    root = avl_remove(root, 5)
    assert list(inorder(root)) == [3, 10, 15]
    assert _links_ok(root)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_random_removals_keep_order_and_links(seed):
    rng = random.Random(seed)
    values = rng.sample(range(500), 40)
    root = array_to_avl(values)
    remaining = set(values)
    for value in rng.sample(values, 30):
        root = avl_remove(root, value)
        remaining.discard(value)
        assert list(inorder(root)) == sorted(remaining)
        assert _links_ok(root)


def test_removing_everything_empties_tree():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    root = array_to_avl(values)
    for value in values:
        root = avl_remove(root, value)
    assert root is None


def test_sorted_array_to_avl_perfect_levelorder():
    root = sorted_array_to_avl([1, 2, 3, 4, 5, 6, 7])
    assert list(levelorder(root)) == [4, 2, 6, 1, 3, 5, 7]


def test_sorted_array_even_count_uses_lower_middle():
    root = sorted_array_to_avl([1, 2, 3, 4])
    assert root.value == 2


@pytest.mark.parametrize("count", [1, 2, 5, 10, 31, 64])
def test_sorted_array_to_avl_invariants(count):
    values = list(range(count))
    root = sorted_array_to_avl(values)
    assert list(inorder(root)) == values
    assert _balanced(root)
    assert _links_ok(root)


def test_sorted_array_to_avl_empty():
    assert sorted_array_to_avl([]) is None