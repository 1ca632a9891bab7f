# treekit

Linked binary trees where every node knows its parent, with the usual
measurements, traversals and checks, and on top of them binary search trees,
AVL trees and max binary heaps. Values are integers.

## Installing

```
pip install .
```

The tests need pytest:

```
pip install ".[test]"
pytest
```

## Building trees by hand

`treekit.tree.Node` is a dataclass with `value`, `parent`, `left` and `right`.

```python
from treekit.tree import binary_tree_node, insert_left, insert_right, inorder, height

root = binary_tree_node(None, 98)
insert_left(root, 12)
insert_right(root, 402)

list(inorder(root))   # [12, 98, 402]
height(root)          # 1
```

`insert_left` and `insert_right` push an existing child down one level below
the new node, and raise `ValueError` when given no parent.

`treekit.tree` also provides:

- `preorder`, `inorder`, `postorder`: generators of the stored values;
- `height` (edges on the longest downward path), `depth` (edges up to the
  root), `size`, `leaves`, `nodes` (nodes with at least one child) and
  `balance` (left subtree height minus right subtree height); each gives 0
  for no tree;
- `is_leaf`, `is_root`, `is_full`, `is_perfect`;
- `sibling` and `uncle`, which return `None` where there is none;
- `delete`, which detaches a subtree from its parent and unlinks all its nodes.

## Structure checks and rotations

`treekit.advanced` has:

- `ancestor(first, second)`: the lowest common ancestor of two nodes, or `None`;
- `levelorder(tree)`: a generator of values level by level, left to right;
- `is_complete`, `is_bst` (distinct values, ordered left to right);
- `is_avl`: true for a binary search tree whose two root subtrees have equal
  heights;
- `rotate_left` / `rotate_right`: rotate around a node and return the new
  subtree root. The new root takes over the old one's parent link; relinking
  the parent's child pointer is left to the caller.

## Binary search trees

```python
from treekit.bst import array_to_bst, bst_search, bst_remove

root = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
bst_search(root, 68).value   # 68
root = bst_remove(root, 79)
bst_search(root, 79)         # None
```

`bst_insert(root, value)` returns the newly created node (a lone new node when
`root` is `None`) and raises `ValueError` for a value already in the tree.
`array_to_bst` skips duplicate values. `bst_remove` returns the root of the
tree, which changes when the root itself is removed; an absent value leaves
the tree as it was.

## AVL trees

`treekit.avl` offers:

- `avl_insert(root, value)`: returns `(root, new_node)`, since rotations may
  change the root; raises `ValueError` for a duplicate value;
- `array_to_avl(values)`: inserts in order, skipping duplicates;
- `avl_remove(root, value)`: replaces the removed node by its in-order
  successor (or predecessor when it has no right child), rebalances, and
  returns the new root;
- `sorted_array_to_avl(values)`: builds a balanced tree from sorted values by
  rooting each subtree at the middle element (the lower middle for an even
  count), without rotations.

```python
from treekit.avl import array_to_avl, avl_insert
from treekit.tree import inorder

root = array_to_avl([98, 402, 12, 46, 128])
root, node = avl_insert(root, 256)
list(inorder(root))   # [12, 46, 98, 128, 256, 402]
```

## Max binary heaps

`treekit.heap` provides `is_heap` (complete, and no child larger than its
parent), `heap_insert(root, value)`, which returns `(root, new_node)` after
sifting the value up, and `array_to_heap(values)`. Duplicate values are kept.

## What is not included

The package has no command-line tool and does not draw or print trees.
Heaps can be built and checked, but there is no operation to extract the
maximum from a heap or to turn a heap into a sorted list.