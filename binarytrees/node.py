"""Binary tree nodes and the operations that relate nodes to one another."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; the caller decides on which side the node goes.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    if parent.left is not None:
        node.left = parent.left
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    if parent.right is not None:
        node.right = parent.right
        parent.right.parent = node
    parent.right = node
    return node


def _subtree(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def delete(tree: Optional[Node]) -> None:
    """Take apart the whole tree rooted at ``tree``, unlinking every node."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    for node in list(_subtree(tree)):
        node.parent = None
        node.left = None
        node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def _ancestors(node: Node) -> Iterator[Node]:
    current = node.parent
    while current is not None:
        yield current
        current = current.parent


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and its root (0 for None)."""
    if node is None:
        return 0
    return sum(1 for _ in _ancestors(node))


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor.
    """
    if first is None or second is None:
        return None
    depth_first = depth(first)
    depth_second = depth(second)
    while depth_first > depth_second:
        first = first.parent
        depth_first -= 1
    while depth_second > depth_first:
        second = second.parent
        depth_second -= 1
    while first is not None and second is not None:
        if first is second:
            return first
        first = first.parent
        second = second.parent
    return None