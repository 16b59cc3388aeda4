"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from binarytrees.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the tree's values node first, then left subtree, then right."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the tree's values left subtree first, then node, then right."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the tree's values left subtree first, then right, then node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the tree's values level by level, left to right within a level."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)