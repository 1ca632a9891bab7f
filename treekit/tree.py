"""Binary tree nodes and the basic operations on them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "Node",
    "binary_tree_node",
    "insert_left",
    "insert_right",
    "delete",
    "is_leaf",
    "is_root",
    "preorder",
    "inorder",
    "postorder",
    "height",
    "depth",
    "size",
    "leaves",
    "nodes",
    "balance",
    "is_full",
    "is_perfect",
    "sibling",
    "uncle",
]


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def binary_tree_node(parent: Optional[Node], value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``."""
    return Node(value, parent)


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new left child; an existing left child becomes its left child."""
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new_node = binary_tree_node(parent, value)
    if parent.left is not None:
        new_node.left = parent.left
        parent.left.parent = new_node
    parent.left = new_node
    return new_node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new right child; an existing right child becomes its right child."""
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new_node = binary_tree_node(parent, value)
    if parent.right is not None:
        new_node.right = parent.right
        parent.right.parent = new_node
    parent.right = new_node
    return new_node


def delete(tree: Optional[Node]) -> None:
    """Unlink every node of the subtree rooted at ``tree``, detaching it from its parent."""
    if tree is None:
        return
    owner = tree.parent
    if owner is not None:
        if owner.left is tree:
            owner.left = None
        if owner.right is tree:
            owner.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def _edge_height(tree: Optional[Node]) -> int:
    """Height in edges; an empty tree has height -1."""
    if tree is None:
        return -1
    return max(_edge_height(tree.left), _edge_height(tree.right)) + 1


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path, or 0 for no tree."""
    if tree is None:
        return 0
    return _edge_height(tree)


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges between ``tree`` and the root, or 0 for no node."""
    count = 0
    node = tree.parent if tree is not None else None
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in preorder(tree))


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes having at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height, or 0 for no tree."""
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    for node in _walk(tree):
        if (node.left is None) != (node.right is None):
            return False
    return True


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all interior nodes have two children and all leaves share a level."""
    if tree is None or _edge_height(tree.left) != _edge_height(tree.right):
        return False
    if tree.left is None:
        return True
    if is_leaf(tree.left) and is_leaf(tree.right):
        return True
    if tree.left is not None and tree.right is not None:
        return is_perfect(tree.left) and is_perfect(tree.right)
    return False


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is not node:
        return node.parent.left
    return node.parent.right


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)