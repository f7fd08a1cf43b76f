"""Drawing a binary tree as text."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from arbortree.node import Node


def _edge_height(tree: Node) -> int:
    levels = 0
    level = [tree]
    while True:
        level = [c for n in level for c in (n.left, n.right) if c is not None]
        if not level:
            return levels
        levels += 1


class _Canvas:
    def __init__(self, rows: int) -> None:
        self.rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        if col < 0:
            return
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self.rows]


def _draw(tree: Optional[Node], offset: int, level: int, canvas: _Canvas) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, level + 1, canvas)
    right = _draw(tree.right, offset + left + width, level + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)
    if level:
        above = level - 1
        if is_left:
            start, span = offset + left + width // 2, width + right
        else:
            start, span = offset - width // 2, left + width
        for col in range(start, start + span):
            canvas.put(above, col, "-")
        canvas.put(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return a drawing of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    canvas = _Canvas(_edge_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(format_tree(tree))