"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from binarytrees.node import Node


def _relink_parent(old: Node, new: Node, parent: Optional[Node]) -> None:
    new.parent = parent
    old.parent = new
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` to the left and return the new subtree root.

    Raises ValueError if the tree is missing or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    _relink_parent(tree, pivot, tree.parent)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` to the right and return the new subtree root.

    Raises ValueError if the tree is missing or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    _relink_parent(tree, pivot, tree.parent)
    return pivot