"""Binary search trees: insertion, construction, search and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from binarytrees.node import Node


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the search tree rooted at ``root``.

    Returns the created node; when ``root`` is None that node is the new
    root. Raises ValueError if the value is already in the tree.
    """
    if root is None:
        return Node(value)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return current.left
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return current.right
            current = current.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting ``values`` in order, skipping duplicates."""
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
    """Return the node holding ``value``, or None if there is none."""
    node = tree
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None


def _minimum(tree: Node) -> Node:
    while tree.left is not None:
        tree = tree.left
    return tree


def _replace(node: Node, child: Optional[Node]) -> Optional[Node]:
    if child is not None:
        child.parent = node.parent
    node.parent = node.left = node.right = None
    return child


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the search tree and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed instead. A missing value leaves the tree unchanged.
    """
    if root is None:
        return None
    if value < root.value:
        root.left = bst_remove(root.left, value)
        if root.left is not None:
            root.left.parent = root
    elif value > root.value:
        root.right = bst_remove(root.right, value)
        if root.right is not None:
            root.right.parent = root
    else:
        if root.left is None:
            return _replace(root, root.right)
        if root.right is None:
            return _replace(root, root.left)
        successor = _minimum(root.right)
        root.value = successor.value
        root.right = bst_remove(root.right, successor.value)
        if root.right is not None:
            root.right.parent = root
    return root