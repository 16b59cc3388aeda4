"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from binarytrees.node import Node, is_leaf


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _node_height(tree: Optional[Node]) -> int:
    """Height counted in nodes: 0 for None, 1 for a leaf."""
    if tree is None:
        return 0
    return 1 + max(_node_height(tree.left), _node_height(tree.right))


def height(tree: Optional[Node]) -> int:
    """Return the height of the tree in edges (0 for a leaf or None)."""
    if tree is None:
        return 0
    return _node_height(tree) - 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right one."""
    if tree is None:
        return 0
    return _node_height(tree.left) - _node_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every node has a balance factor of zero."""
    if tree is None:
        return False
    return all(balance(node) == 0 for node in _walk(tree))


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete (filled level by level, left first)."""
    if tree is None:
        return False
    count = size(tree)
    stack: list[tuple[Optional[Node], int]] = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if node is None:
            continue
        if index >= count:
            return False
        stack.append((node.left, 2 * index + 1))
        stack.append((node.right, 2 * index + 2))
    return True


def _within(value: int, low: Optional[int], high: Optional[int]) -> bool:
    return (low is None or value > low) and (high is None or value < high)


def _is_bst(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if not _within(tree.value, low, high):
        return False
    return _is_bst(tree.left, low, tree.value) and _is_bst(
        tree.right, tree.value, high
    )


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree without duplicates."""
    if tree is None:
        return False
    return _is_bst(tree, None, None)


def _is_avl(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if not _within(tree.value, low, high):
        return False
    if abs(balance(tree)) > 1:
        return False
    return _is_avl(tree.left, low, tree.value) and _is_avl(
        tree.right, tree.value, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a search tree balanced at every node."""
    if tree is None:
        return False
    return _is_avl(tree, None, None)


def _is_heap(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if not is_complete(tree):
        return False
    if any(
        child is not None and child.value > tree.value
        for child in (tree.left, tree.right)
    ):
        return False
    return _is_heap(tree.left) and _is_heap(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid max binary heap."""
    if tree is None:
        return False
    return _is_heap(tree)