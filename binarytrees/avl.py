"""AVL trees: balanced insertion, construction and removal."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from binarytrees.measure import balance
from binarytrees.node import Node
from binarytrees.rotate import rotate_left, rotate_right


def _top(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def _insert(
    tree: Optional[Node], parent: Optional[Node], value: int
) -> tuple[Node, Node]:
    """Insert below ``tree``; return the subtree's new root and the created node."""
    if tree is None:
        node = Node(value, parent)
        return node, node
    if value < tree.value:
        tree.left, created = _insert(tree.left, tree, value)
    elif value > tree.value:
        tree.right, created = _insert(tree.right, tree, value)
    else:
        raise ValueError(f"value {value} is already in the tree")

    factor = balance(tree)
    if factor > 1 and value < tree.left.value:
        tree = rotate_right(tree)
    elif factor < -1 and value > tree.right.value:
        tree = rotate_left(tree)
    elif factor > 1 and value > tree.left.value:
        tree.left = rotate_left(tree.left)
        tree = rotate_right(tree)
    elif factor < -1 and value < tree.right.value:
        tree.right = rotate_right(tree.right)
        tree = rotate_left(tree)
    return tree, created


def avl_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the AVL tree rooted at ``root`` and return the new node.

    Rotations may change which node is the root; follow parent links from
    any node to reach it. When ``root`` is None the new node is the root.
    Raises ValueError if the value is already in the tree.
    """
    if root is None:
        return Node(value)
    _insert(root, root.parent, value)
    return _find_created(root, value)


def _find_created(start: Node, value: int) -> Node:
    node: Optional[Node] = _top(start)
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    raise LookupError(f"value {value} was not found after insertion")


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting ``values`` in order, skipping duplicates."""
    root: Optional[Node] = None
    for value in values:
        try:
            node = avl_insert(root, value)
        except ValueError:
            continue
        root = _top(node)
    return root


def _rebalance(tree: Node) -> Node:
    factor = balance(tree)
    if factor > 1:
        if balance(tree.left) < 0:
            tree.left = rotate_left(tree.left)
        return rotate_right(tree)
    if factor < -1:
        if balance(tree.right) > 0:
            tree.right = rotate_right(tree.right)
        return rotate_left(tree)
    return tree


def _minimum(tree: Node) -> Node:
    while tree.left is not None:
        tree = tree.left
    return tree


def _remove(tree: Optional[Node], value: int) -> Optional[Node]:
    if tree is None:
        return None
    if value < tree.value:
        tree.left = _remove(tree.left, value)
        if tree.left is not None:
            tree.left.parent = tree
    elif value > tree.value:
        tree.right = _remove(tree.right, value)
        if tree.right is not None:
            tree.right.parent = tree
    else:
        if tree.left is None or tree.right is None:
            child = tree.left if tree.left is not None else tree.right
            if child is not None:
                child.parent = tree.parent
            tree.parent = tree.left = tree.right = None
            return child
        successor = _minimum(tree.right)
        tree.value = successor.value
        tree.right = _remove(tree.right, successor.value)
        if tree.right is not None:
            tree.right.parent = tree
    return _rebalance(tree)


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the AVL tree and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed instead. A missing value leaves the tree unchanged.
    """
    return _remove(root, value)


def _build(values: Sequence[int], parent: Optional[Node]) -> Optional[Node]:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = Node(values[middle], parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1 :], node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from values already sorted in ascending order.

    The middle element (the lower one for an even count) becomes the root
    of each subtree. Returns None for no values.
    """
    return _build(list(values), None)