"""Binary search tree insertion, construction, lookup and removal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from treekit.tree import Node, binary_tree_node, is_leaf

__all__ = ["bst_insert", "array_to_bst", "bst_search", "bst_remove"]


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the BST at ``root`` and return the new node.

    With no root the new node is returned on its own and becomes the root.
    Raises ValueError if the value is already present.
    """
    if root is None:
        return binary_tree_node(None, value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = binary_tree_node(node, value)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = binary_tree_node(node, value)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST by inserting ``values`` in order, skipping duplicates."""
    root: Optional[Node] = None
    for value in values:
        if root is None:
            root = bst_insert(None, value)
            continue
        try:
            bst_insert(root, value)
        except ValueError:
            pass
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    node = tree
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


def _replace_child(parent: Optional[Node], old: Node, new: Optional[Node]) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    if parent.right is old:
        parent.right = new


def _detach(node: Node) -> None:
    node.parent = node.left = node.right = None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the node holding ``value`` and return the root of the tree.

    A node with a right child is replaced by that child's left child when it
    has one, otherwise by the right child itself; a node with only a left
    child is replaced by it. Absent values leave the tree unchanged.
    """
    node = bst_search(root, value)
    if node is None:
        return root

    if is_leaf(node):
        _replace_child(node.parent, node, None)
        if node is root:
            root = None
    elif node.right is not None and node.right.left is not None:
        right = node.right
        successor = right.left
        successor.right = right
        successor.parent = node.parent
        successor.left = node.left
        if node.left is not None:
            node.left.parent = successor
        right.parent = successor
        if node is root:
            root = successor
        else:
            _replace_child(node.parent, node, successor)
        right.left = None
    elif node.right is not None:
        right = node.right
        right.left = node.left
        right.parent = node.parent
        _replace_child(node.parent, node, right)
        if node.left is not None:
            node.left.parent = right
        if node is root:
            root = right
    else:
        left = node.left
        _replace_child(node.parent, node, left)
        left.parent = node.parent
        if node is root:
            root = left

    _detach(node)
    return root