"""Ancestry, level-order traversal, rotations and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from treekit.tree import Node, balance, depth, is_leaf, size

__all__ = [
    "ancestor",
    "levelorder",
    "is_complete",
    "rotate_left",
    "rotate_right",
    "is_bst",
    "is_avl",
]


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if they share none."""
    while first is not None and second is not None:
        if first is second:
            return first
        first_depth, second_depth = depth(first), depth(second)
        if first_depth > second_depth:
            first = first.parent
        elif first_depth < second_depth:
            second = second.parent
        else:
            first, second = first.parent, second.parent
    return None


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is full except possibly the last, filled from the left."""
    if tree is None:
        return False
    count = size(tree)
    queue = deque([(tree, 0)])
    while queue:
        node, index = queue.popleft()
        if index >= count:
            return False
        if node.left is not None:
            queue.append((node.left, 2 * index + 1))
        if node.right is not None:
            queue.append((node.right, 2 * index + 2))
    return True


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate left around ``tree`` and return the new subtree root.

    The new root inherits ``tree``'s parent link; the caller relinks the
    parent's child pointer. A tree without a right child is returned as is.
    """
    if tree is None or tree.right is None:
        return tree
    new_root = tree.right
    tree.right = new_root.left
    if new_root.left is not None:
        new_root.left.parent = tree
    new_root.left = tree
    new_root.parent = tree.parent
    tree.parent = new_root
    return new_root


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate right around ``tree`` and return the new subtree root.

    The new root inherits ``tree``'s parent link; the caller relinks the
    parent's child pointer. A tree without a left child is returned as is.
    """
    if tree is None or tree.left is None:
        return tree
    new_root = tree.left
    tree.left = new_root.right
    if new_root.right is not None:
        new_root.right.parent = tree
    new_root.right = tree
    new_root.parent = tree.parent
    tree.parent = new_root
    return new_root


def _respects_ancestors(node: Optional[Node]) -> bool:
    """Check ``node`` against each ancestor pair above its parent."""
    if node is None or node.parent is None or node.parent.parent is None:
        return True
    parent, grand = node.parent, node.parent.parent
    while parent is not None and grand is not None:
        if parent.value < grand.value and node.value >= grand.value:
            return False
        if parent.value > grand.value and node.value <= grand.value:
            return False
        parent, grand = grand, grand.parent
    return True


def _check_bst(tree: Optional[Node]) -> bool:
    if tree is None or is_leaf(tree):
        return True
    if tree.left is not None and tree.left.value >= tree.value:
        return False
    if tree.right is not None and tree.right.value <= tree.value:
        return False
    if not _respects_ancestors(tree.left) or not _respects_ancestors(tree.right):
        return False
    return _check_bst(tree.left) and _check_bst(tree.right)


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree with distinct values."""
    if tree is None:
        return False
    return _check_bst(tree)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a BST whose root subtrees have equal heights."""
    return tree is not None and _check_bst(tree) and balance(tree) == 0