"""Binary tree nodes with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node only records its parent. It does not attach the node
    to either of the parent's child slots.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new node as the left child.

        Any existing left child becomes the new node's left child.
        """
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            new.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new node as the right child.

        Any existing right child becomes the new node's right child.
        """
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            new.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Remove this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True when the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()