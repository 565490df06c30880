"""A binary search tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from typing import Optional


class BstNode:
    """A binary search tree node keyed by an integer.

    Smaller keys go to the left; equal and larger keys go to the right.
    """

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional["BstNode"] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> "BstNode":
        """Replace the left child with a new node and return it."""
        self.left = BstNode(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "BstNode":
        """Replace the right child with a new node and return it."""
        self.right = BstNode(value, parent=self)
        return self.right

    def copy(self) -> "BstNode":
        """Return a shallow copy sharing this node's parent and children."""
        duplicate = BstNode(self.key, parent=self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def search(self, value: int) -> Optional["BstNode"]:
        """Return the first node holding ``value`` in this subtree, if any."""
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == value:
                return node
            node = node.left if value < node.key else node.right
        return None

    def minimum(self) -> "BstNode":
        """The node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> "BstNode":
        """The node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def root(self) -> "BstNode":
        """The root of the tree this node belongs to."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def successor(self) -> Optional["BstNode"]:
        """The node that follows this one in key order, or None if it is the last."""
        if self.right is not None:
            return self.right.minimum()
        node = self
        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = parent.parent
        return parent

    def insert(self, value: int) -> "BstNode":
        """Insert ``value`` below this node and return the new node."""
        node = self
        while True:
            if node.key > value:
                if node.left is None:
                    return node.add_left_child(value)
                node = node.left
            else:
                if node.right is None:
                    return node.add_right_child(value)
                node = node.right

    @staticmethod
    def _transplant(u: "BstNode", v: Optional["BstNode"]) -> None:
        """Put ``v`` where ``u`` hangs from its parent."""
        parent = u.parent
        if parent is not None:
            if parent.left is u:
                parent.left = v
            else:
                parent.right = v
        if v is not None:
            v.parent = parent

    def delete(self, target: "BstNode") -> Optional["BstNode"]:
        """Remove ``target`` from the tree rooted here and return the new root.

        The result is None when the last node of the tree was removed.
        """
        was_root = target.parent is None
        if target.left is None:
            replacement = target.right
            self._transplant(target, replacement)
        elif target.right is None:
            replacement = target.left
            self._transplant(target, replacement)
        else:
            successor = target.right.minimum()
            if successor.parent is not target:
                self._transplant(successor, successor.right)
                successor.right = target.right
                successor.right.parent = successor
            self._transplant(target, successor)
            successor.left = target.left
            successor.left.parent = successor
            replacement = successor
        return replacement if was_root else self