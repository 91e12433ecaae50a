"""A binary search tree whose nodes keep a link to their parent."""

from __future__ import annotations

from typing import Iterator, Optional


class BstNode:
    """A binary search tree node holding an integer key.

    The key becomes ``None`` once the last node of a tree has been deleted.
    """

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: Optional[int], parent: Optional[BstNode] = None) -> None:
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

    def add_left_child(self, key: int) -> BstNode:
        """Attach a new left child, replacing any existing one, and return it."""
        self.left = BstNode(key, self)
        return self.left

    def add_right_child(self, key: int) -> BstNode:
        """Attach a new right child, replacing any existing one, and return it."""
        self.right = BstNode(key, self)
        return self.right

    def copy(self) -> BstNode:
        """Return a shallow copy that shares parent and children with this node."""
        duplicate = BstNode(self.key, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def tree_search(self, value: int) -> Optional[BstNode]:
        """Return a copy of the node holding ``value``, or ``None``."""
        found = self._find(value)
        return None if found is None else found.copy()

    def minimum(self) -> BstNode:
        """Return a copy of the node with the smallest key in this subtree."""
        return self._leftmost().copy()

    def maximum(self) -> BstNode:
        """Return a copy of the node with the largest key in this subtree."""
        node = self
        while node.key is not None and node.right is not None:
            node = node.right
        return node.copy()

    def get_root(self) -> BstNode:
        """Follow parent links up and return the topmost node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> Optional[BstNode]:
        """Return the node with the next larger key, or ``None`` for the largest."""
        if self.right is not None:
            return self.right.minimum()
        child: BstNode = self
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.left is not None and ancestor.left.key == child.key:
                return ancestor
            child = ancestor
            ancestor = ancestor.parent
        return None

    def tree_successor_simpler(self) -> Optional[BstNode]:
        """Return a successor candidate using the nil-node shortcut.

        A right child counts as nil unless it has a parent and both children;
        only then is its subtree minimum taken. Otherwise the parent is used,
        stepping up once more while the current node is that parent's right
        child. ``None`` is returned when the walk ends at the root.

        Raises ``ValueError`` when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            assert self.right is not None
            return self.right.minimum()

        current: BstNode = self
        candidate = current.parent
        if candidate is None:
            raise ValueError("node has no parent to look for a successor in")
        candidate_right = candidate.right
        while _is_nil(candidate) and _same_key(current, candidate_right):
            current = candidate
            if candidate.parent is None:
                raise ValueError("walked past the root looking for a successor")
            candidate = candidate.parent

        if _same_key(candidate, current.get_root()):
            return None
        return candidate

    def tree_insert(self, value: int) -> BstNode:
        """Insert ``value`` below this node and return the new node.

        Values equal to a key go to the right.
        """
        node = self
        while True:
            if node.key is None:
                raise ValueError("cannot insert below a node without a key")
            if value < node.key:
                if node.left is None:
                    return node.add_left_child(value)
                node = node.left
            else:
                if node.right is None:
                    return node.add_right_child(value)
                node = node.right

    def tree_delete(self, value: int) -> None:
        """Remove the node holding ``value`` from the tree below this node.

        Deleting a childless root clears its key. A root with a single child
        is left as it is. Missing values are ignored.
        """
        target = self._find(value)
        if target is None:
            return
        parent = target.parent

        if target.left is not None and target.right is not None:
            self._delete_with_two_children(target)
        elif target.left is not None or target.right is not None:
            if parent is None:
                return
            child = target.left if target.left is not None else target.right
            assert child is not None and child.key is not None
            if child.key < parent.key:
                parent._transplant(parent.left, child)
            else:
                parent._transplant(parent.right, child)
        elif parent is None:
            self.key = None
        elif value < parent.key:
            parent._transplant(parent.left, None)
        else:
            parent._transplant(parent.right, None)

    def _delete_with_two_children(self_root, target: BstNode) -> None:
        target_right = target.right
        target_left = target.left
        assert target_right is not None and target_left is not None
        successor = target_right._leftmost()

        if successor.key != target_right.key:
            successor_parent = successor.parent
            assert successor_parent is not None
            if successor.key < successor_parent.key:
                successor_parent._transplant(successor_parent.left, successor.right)
            else:
                successor_parent._transplant(successor_parent.right, successor.right)
            successor.right = target_right
            target_right.parent = successor

        successor.left = target_left
        target_left.parent = successor

        target_parent = target.parent
        if target_parent is None:
            target.key = successor.key
            target.left = successor.left
            target.right = successor.right
            for child in target._children():
                child.parent = target
        elif target.key < target_parent.key:
            target_parent._transplant(target_parent.left, successor)
        else:
            target_parent._transplant(target_parent.right, successor)

    def _transplant(self, old: Optional[BstNode], new: Optional[BstNode]) -> None:
        """Replace the child of this node whose key matches ``old`` with ``new``."""
        if self.left is not None and _same_key(self.left, old):
            if new is not None and old is not None:
                new.parent = old.parent
            self.left = new
        if self.right is not None and _same_key(self.right, old):
            if new is not None and old is not None:
                new.parent = old.parent
            self.right = new
        if new is not None and old is not None:
            new.parent = old.parent

    def _find(self, value: int) -> Optional[BstNode]:
        node: Optional[BstNode] = self
        while node is not None and node.key is not None:
            if node.key == value:
                return node
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def _leftmost(self) -> BstNode:
        node = self
        while node.key is not None and node.left is not None:
            node = node.left
        return node

    def _children(self) -> Iterator[BstNode]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _is_nil(node: Optional[BstNode]) -> bool:
    return node is None or node.parent is None or node.left is None or node.right is None


def _same_key(first: Optional[BstNode], second: Optional[BstNode]) -> bool:
    if first is None:
        return second is None
    return second is not None and first.key == second.key