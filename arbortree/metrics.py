"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbortree.node import Node


def _iter_nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Optional[Node]) -> Iterator[list[Node]]:
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def height(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path, 0 for None."""
    return sum(1 for _ in _levels(tree))


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root, 0 for None."""
    count = 0
    node = tree
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _iter_nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _iter_nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _iter_nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height."""
    if tree is None:
        return 0
    return height(tree.left) - height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True when every node has either zero or two children.

    An empty tree counts as full.
    """
    return all(
        (node.left is None) == (node.right is None) for node in _iter_nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True when the tree is full and all leaves share one level.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    queue = deque([tree])
    expected = 1
    seen_leaf = False
    for level in _levels(tree):
        if len(level) != expected:
            return False
        for node in level:
            has_left = node.left is not None
            has_right = node.right is not None
            if has_left != has_right:
                return False
            if not has_left:
                seen_leaf = True
            elif seen_leaf:
                return False
        expected *= 2
    queue.clear()
    return True