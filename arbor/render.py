"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from arbor.metrics import height
from arbor.node import Node


def _put(rows: list[list[str]], row: int, col: int, char: str) -> None:
    line = rows[row]
    if col >= len(line):
        line.extend(" " * (col - len(line) + 1))
    line[col] = char


def _layout(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = "(%03d)" % node.value
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows, depth, offset + left + i, char)
    if depth:
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            _put(rows, depth - 1, start + i, "-")
        _put(rows, depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return a drawing of the tree, one text line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = ("".join(row).rstrip(" ").ljust(2) for row in rows)
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))