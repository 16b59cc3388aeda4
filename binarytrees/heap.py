"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from typing import Iterable, Optional

from binarytrees.measure import size
from binarytrees.node import Node


def _node_at(root: Node, position: int) -> Node:
    """Return the node at 1-based level-order ``position`` of a complete tree."""
    node = root
    for bit in bin(position)[3:]:
        node = node.right if bit == "1" else node.left
    return node


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the max heap rooted at ``root``.

    Returns the node that holds the inserted value once it has moved up
    into place. When ``root`` is None the new node is the root.
    """
    if root is None:
        return Node(value)
    position = size(root) + 1
    parent = _node_at(root, position >> 1)
    node = Node(value, parent)
    if position & 1:
        parent.right = node
    else:
        parent.left = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the largest value from the heap.

    Returns that value and the heap's root afterwards (None once the heap
    is empty). Raises ValueError for an empty heap.
    """
    if root is None:
        raise ValueError("cannot extract from an empty heap")
    top = root.value
    count = size(root)
    if count == 1:
        return top, None
    last = _node_at(root, count)
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    root.value = last.value

    node = root
    while True:
        children = [child for child in (node.left, node.right) if child is not None]
        if not children:
            break
        largest = max(children, key=lambda child: child.value)
        if largest.value <= node.value:
            break
        node.value, largest.value = largest.value, node.value
        node = largest
    return top, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap and return its values in descending order."""
    values: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        values.append(value)
    return values