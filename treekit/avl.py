"""AVL tree insertion, construction and removal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from treekit.advanced import rotate_left, rotate_right
from treekit.tree import Node, balance, binary_tree_node

__all__ = ["avl_insert", "array_to_avl", "avl_remove", "sorted_array_to_avl"]


def _rebalance_after_insert(node: Node, value: int) -> Node:
    """Restore balance at ``node`` after ``value`` was inserted below it."""
    factor = balance(node)
    if factor > 1 and value < node.left.value:
        return rotate_right(node)
    if factor < -1 and value > node.right.value:
        return rotate_left(node)
    if factor > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if factor < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def _insert(node: Node, value: int) -> tuple[Node, Node]:
    """Insert below ``node``; return the new subtree root and the new node."""
    if value < node.value:
        if node.left is None:
            node.left = binary_tree_node(node, value)
            return node, node.left
        node.left, new_node = _insert(node.left, value)
        return _rebalance_after_insert(node, value), new_node
    if value > node.value:
        if node.right is None:
            node.right = binary_tree_node(node, value)
            return node, node.right
        node.right, new_node = _insert(node.right, value)
        return _rebalance_after_insert(node, value), new_node
    raise ValueError(f"value {value} is already in the tree")


def avl_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` into the AVL tree at ``root``.

    Returns the root of the tree after rebalancing and the new node.
    Raises ValueError if the value is already present.
    """
    if root is None:
        node = binary_tree_node(None, value)
        return node, node
    return _insert(root, value)


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting ``values`` in order, skipping duplicates."""
    root: Optional[Node] = None
    for value in values:
        try:
            root, _ = avl_insert(root, value)
        except ValueError:
            pass
    return root


def _rebalance_after_removal(node: Node, value: int) -> Node:
    """Restore balance at ``node`` after ``value`` was removed below it."""
    factor = balance(node)
    if factor > 1 and value > node.left.value:
        return rotate_right(node)
    if factor < -1 and value < node.right.value:
        return rotate_left(node)
    if factor > 1 and value < node.left.value:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if factor < -1 and value > node.right.value:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def _unlink_from_parent(node: Node) -> None:
    parent = node.parent
    if parent is None:
        return
    if parent.left is node:
        parent.left = None
    else:
        parent.right = None


def _take_leftmost(node: Node) -> Node:
    """Detach and return the leftmost node below ``node`` (its parent link is kept)."""
    while node.left is not None:
        node = node.left
    _unlink_from_parent(node)
    return node


def _take_rightmost(node: Node) -> Node:
    """Detach and return the rightmost node below ``node`` (its parent link is kept)."""
    while node.right is not None:
        node = node.right
    parent = node.parent
    if parent.right is node:
        parent.right = None
    else:
        parent.left = None
    return node


def _splice(removed: Node, replacement: Node) -> None:
    """Put ``replacement`` where ``removed`` stands, adopting its children."""
    if removed.left is not None and removed.left is not replacement:
        if replacement.left is not None:
            replacement.parent.right = replacement.left
            replacement.left.parent = replacement.parent
        replacement.left = removed.left
        removed.left.parent = replacement
    if removed.right is not None and removed.right is not replacement:
        if replacement.right is not None:
            replacement.parent.left = replacement.right
            replacement.right.parent = replacement.parent
        replacement.right = removed.right
        removed.right.parent = replacement
    replacement.parent = removed.parent
    if removed.parent is not None:
        if removed.parent.left is removed:
            removed.parent.left = replacement
        else:
            removed.parent.right = replacement


def _delete_node(node: Node) -> Optional[Node]:
    """Remove ``node`` and return what now stands in its place."""
    if node.left is None and node.right is None:
        _unlink_from_parent(node)
        node.parent = None
        return None
    if node.right is not None:
        replacement = _take_leftmost(node.right)
    else:
        replacement = _take_rightmost(node.left)
    _splice(node, replacement)
    node.parent = node.left = node.right = None
    return replacement


def _remove(tree: Optional[Node], value: int) -> Optional[Node]:
    if tree is None:
        return None
    if value < tree.value:
        tree.left = _remove(tree.left, value)
        return _rebalance_after_removal(tree, value)
    if value > tree.value:
        tree.right = _remove(tree.right, value)
        return _rebalance_after_removal(tree, value)
    return _delete_node(tree)


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the AVL tree at ``root`` and return the new root.

    A removed node is replaced by its in-order successor, or by its in-order
    predecessor when it has no right child. Absent values change nothing.
    """
    if root is None:
        return None
    return _remove(root, value)


def _build(values: Sequence[int], parent: Optional[Node]) -> Optional[Node]:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = binary_tree_node(parent, values[middle])
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1:], node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted ``values`` without any rotation.

    Each subtree is rooted at the middle element, the lower middle for an
    even count. Returns None for no values.
    """
    return _build(list(values), None)