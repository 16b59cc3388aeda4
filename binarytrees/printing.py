"""Text drawing of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from binarytrees.measure import height
from binarytrees.node import Node


def _put(row: list[str], pos: int, char: str) -> None:
    if pos < 0:
        return
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``tree`` into ``rows`` starting at column ``offset``; return its width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for pos in range(start, start + count):
            _put(above, pos, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return a drawing of the tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join("".join(row).rstrip() + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))