"""A plain binary tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


def _same_value(a: Optional["Node"], b: Optional["Node"]) -> bool:
    """True when both are absent, or both present with equal values."""
    if a is None or b is None:
        return a is None and b is None
    return a.value == b.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional["Node"] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return f"Node(value={self.value!r}, parent={parent!r}, left={self.left!r}, right={self.right!r})"

    def _children(self) -> Iterator["Node"]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def add_left_child(self, value: int) -> "Node":
        """Replace the left child with a new node and return it."""
        self.left = Node(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Replace the right child with a new node and return it."""
        self.right = Node(value, parent=self)
        return self.right

    def copy(self) -> "Node":
        """Return a shallow copy sharing this node's parent and children."""
        duplicate = Node(self.value, parent=self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the first node holding ``value``.

        The search descends into the left child when there is one and into
        the right child only otherwise.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node matching ``node`` in value, parent and children.

        Follows the same left-first path as :meth:`get_node_by_value`.
        """
        current: Optional[Node] = self
        while current is not None:
            if (
                current.value == node.value
                and _same_value(node.parent, current.parent)
                and _same_value(node.left, current.left)
                and _same_value(node.right, current.right)
            ):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Detach the node holding ``value`` along the left-first path.

        Every link walked on the way down is severed; the matching node loses
        its parent. Returns whether a match was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this one included."""
        return 1 + sum(child.count_nodes() for child in self._children())

    def tree_depth(self) -> int:
        """Length in edges of the longest path down from this node."""
        return max((child.tree_depth() + 1 for child in self._children()), default=0)

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left