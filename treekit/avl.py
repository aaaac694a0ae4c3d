"""Self-balancing AVL tree built on linked nodes."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from treekit.node import Node
from treekit.properties import balance, is_leaf, size
from treekit.rotate import rotate_left, rotate_right
from treekit.traversal import inorder


class AVLTree:
    """An AVL tree of distinct integers.

    Values equal to one already stored are not inserted again.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> "AVLTree":
        """Build a tree from sorted values, taking the lower middle as each subtree root."""

        def build(chunk: Sequence[int], parent: Optional[Node]) -> Optional[Node]:
            if not chunk:
                return None
            middle = (len(chunk) - 1) // 2
            node = Node(chunk[middle], parent)
            node.left = build(chunk[:middle], node)
            node.right = build(chunk[middle + 1:], node)
            return node

        tree = cls()
        tree.root = build(list(values), None)
        return tree

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value``, rebalance, and return its new node, or None if present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        self.root, created = self._insert(self.root, None, value)
        return created

    def _insert(
        self, node: Optional[Node], parent: Optional[Node], value: int
    ) -> tuple[Node, Optional[Node]]:
        if node is None:
            created = Node(value, parent)
            return created, created
        if value < node.value:
            node.left, created = self._insert(node.left, node, value)
        elif value > node.value:
            node.right, created = self._insert(node.right, node, value)
        else:
            return node, None
        if created is None:
            return node, None
        return self._rebalance(node, value), created

    @staticmethod
    def _rebalance(node: Node, value: int) -> Node:
        factor = balance(node)
        if factor > 1 and node.left.value > value:
            return rotate_right(node)
        if factor < -1 and node.right.value < value:
            return rotate_left(node)
        if factor > 1 and node.left.value < value:
            node.left = rotate_left(node.left)
            return rotate_right(node)
        if factor < -1 and node.right.value > value:
            node.right = rotate_right(node.right)
            return rotate_left(node)
        return node

    def _find(self, value: int) -> Optional[Node]:
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def remove(self, value: int) -> None:
        """Remove ``value`` if present, then rebalance the whole tree.

        A node with two children takes the value of its in-order successor,
        which is then removed in its place. A missing value leaves the
        contents unchanged.
        """
        node = self._find(value)
        if node is not None:
            if node.left is not None and node.right is not None:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.value = successor.value
                node = successor
            self._unlink(node)
        self.root = self._restore(self.root)

    def _unlink(self, node: Node) -> None:
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def _restore(self, node: Optional[Node]) -> Optional[Node]:
        """Rebalance bottom-up with single rotations wherever a node leans by more than one."""
        if node is None or is_leaf(node):
            return node
        node.left = self._restore(node.left)
        node.right = self._restore(node.right)
        factor = balance(node)
        if factor > 1:
            return rotate_right(node)
        if factor < -1:
            return rotate_left(node)
        return node