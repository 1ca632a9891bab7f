"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from treekit.advanced import is_complete
from treekit.tree import Node, binary_tree_node, is_perfect

__all__ = ["is_heap", "heap_insert", "array_to_heap"]


def _not_above_parent(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if tree.value > tree.parent.value:
        return False
    return _not_above_parent(tree.left) and _not_above_parent(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if not is_complete(tree):
        return False
    return _not_above_parent(tree.left) and _not_above_parent(tree.right)


def _swap_up(node: Node, child: Node) -> Node:
    """Exchange ``child`` with ``node`` if it is larger; return the top of the pair."""
    if child.value <= node.value:
        return node
    if child.left is not None:
        child.left.parent = node
    if child.right is not None:
        child.right.parent = node
    was_left = node.left is child
    other = node.right if was_left else node.left
    grand_left, grand_right = child.left, child.right
    if was_left:
        child.left, child.right = node, other
    else:
        child.left, child.right = other, node
    if other is not None:
        other.parent = child
    if node.parent is not None:
        if node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child
    child.parent = node.parent
    node.parent = child
    node.left, node.right = grand_left, grand_right
    return child


def _insert(node: Node, value: int) -> tuple[Node, Node]:
    if is_perfect(node) or not is_perfect(node.left):
        if node.left is not None:
            node.left, new_node = _insert(node.left, value)
        else:
            new_node = node.left = binary_tree_node(node, value)
        return _swap_up(node, node.left), new_node
    if node.right is not None:
        node.right, new_node = _insert(node.right, value)
    else:
        new_node = node.right = binary_tree_node(node, value)
    return _swap_up(node, node.right), new_node


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` into the max heap at ``root``.

    Returns the root of the heap after sifting up and the new node.
    """
    if root is None:
        node = binary_tree_node(None, value)
        return node, node
    return _insert(root, value)


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root