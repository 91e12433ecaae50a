"""A plain binary tree whose nodes keep a link to their parent."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> Node:
        """Attach a new left child, replacing any existing one, and return it."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Attach a new right child, replacing any existing one, and return it."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> Node:
        """Return a shallow copy that shares parent and children with this node."""
        duplicate = Node(self.value, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def get_node_by_value(self, value: int) -> Optional[Node]:
        """Find a node with the given value and return a copy of it.

        The search descends into the left subtree when there is one and into
        the right subtree only when there is no left child.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: Node) -> Optional[Node]:
        """Find a node matching ``node`` by its value and the values of its
        parent and both children, and return a copy of it."""
        if (
            self.value == node.value
            and _same_value(node.parent, self.parent)
            and _same_value(node.left, self.left)
            and _same_value(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the node holding ``value`` along with its subtree.

        Every node on the path followed has its link to the next node severed,
        so the branch taken is dropped whether or not the value was found.
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
        """Return the number of nodes in this subtree, itself included."""
        return 1 + sum(child.count_nodes() for child in self._children())

    def tree_depth(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        return max((child.tree_depth() + 1 for child in self._children()), default=0)

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left

    def _children(self):
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _same_value(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None:
        return second is None
    return second is not None and first.value == second.value