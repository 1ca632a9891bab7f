"""Linked binary trees, binary search trees, AVL trees and max binary heaps."""

__version__ = "0.1.0"
__all__ = ["advanced", "avl", "bst", "heap", "tree"]