# binarytrees

A small library for binary trees made of linked nodes. Each `Node` holds an
integer `value` and links to its `parent` and its `left` and `right`
children. On top of that it provides measurements and checks, traversals,
rotations, binary search trees, AVL trees and max binary heaps. A tree can
also be drawn as text.

It is a library only: it has no command-line tool and does not save trees
to or load them from files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building trees

Creating a `Node` records its parent but does not attach it; the caller sets
`left` or `right` on the parent.

```python
from binarytrees.node import Node, insert_left, insert_right, depth, sibling

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root.left, 54)
insert_right(root, 128)   # 402 moves down to become the right child of 128

depth(root.left.right)    # 2
sibling(root.left)        # the node holding 128
```

`insert_left` and `insert_right` push an existing child down below the new
node, and raise `ValueError` when the parent is `None`.

The `binarytrees.node` module also offers `delete` (unlinks every node of a
subtree), `is_leaf`, `is_root`, `uncle` and `lowest_common_ancestor`
(a node counts as its own ancestor; `None` when the nodes share no ancestor).

## Measuring and checking

`binarytrees.measure` has `height` (in edges), `size`, `leaves`,
`internal_nodes`, `balance`, and the checks `is_full`, `is_perfect`,
`is_complete`, `is_bst`, `is_avl` and `is_heap`. Every check returns `False`
for `None`.

```python
from binarytrees.measure import height, size, is_bst

height(root)   # 2
size(root)     # 5
is_bst(root)   # True
```

## Traversals

`binarytrees.traversal` yields values with `preorder`, `inorder`,
`postorder` and `levelorder`:

```python
from binarytrees.traversal import levelorder

list(levelorder(root))   # [98, 12, 128, 54, 402]
```

## Rotations

`binarytrees.rotate.rotate_left` and `rotate_right` rotate a subtree, keep
the parent links in order, and return the subtree's new root. They raise
`ValueError` when the node lacks the child the rotation needs.

## Search trees, AVL trees and heaps

```python
from binarytrees.bst import array_to_bst, bst_search, bst_remove
from binarytrees.avl import array_to_avl, sorted_array_to_avl, avl_remove
from binarytrees.heap import array_to_heap, heap_extract, heap_to_sorted_array

values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]

tree = array_to_bst(values)
bst_search(tree, 32).value   # 32
tree = bst_remove(tree, 79)

avl = array_to_avl(values)
avl = avl_remove(avl, 79)
balanced = sorted_array_to_avl(sorted(values))

heap = array_to_heap(values)
largest, heap = heap_extract(heap)   # 98 and the heap's root afterwards
heap_to_sorted_array(heap)           # the remaining values, largest first
```

Inserts that add one value take the current root, which may be `None`, and
return the new node:

- `bst_insert(root, value)` raises `ValueError` for a value already present.
- `avl_insert(root, value)` also raises `ValueError` for a duplicate;
  rotations may change the root, which is reached by following `parent`
  links from any node.
- `heap_insert(root, value)` returns the node holding the value once it has
  moved up into place.

`array_to_bst` and `array_to_avl` skip duplicate values. `bst_remove` and
`avl_remove` replace a node with two children by its in-order successor and
leave the tree unchanged when the value is missing. `heap_extract` raises
`ValueError` on an empty heap; `heap_to_sorted_array` empties the heap.

## Printing

```python
from binarytrees.printing import format_tree, print_tree

print_tree(root)
```

For the tree built above this prints:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

`format_tree` returns the same drawing as a string, and `print_tree` accepts
a `file` to write to instead of standard output.