"""Binary search tree built on linked nodes."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from treekit.node import Node
from treekit.properties import size
from treekit.traversal import inorder


class BinarySearchTree:
    """A binary search tree of distinct integers.

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
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value`` and return its new node, or None if it is already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None if there is none."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if node.value > value else node.right
        return None

    def remove(self, value: int) -> None:
        """Remove ``value`` from the tree.

        A node with two children takes the value of its in-order successor,
        which is then removed in its place.

        Raises:
            KeyError: if ``value`` is not in the tree.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        self._replace(node, child)

    def _replace(self, node: Node, child: Optional[Node]) -> None:
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