"""Max binary heap built on linked nodes."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from treekit.node import Node
from treekit.traversal import levelorder


class MaxHeap:
    """A max binary heap kept as a complete binary tree of linked nodes.

    Each parent holds a value at least as large as its children. New values
    fill the first free slot of the bottom level and rise while they exceed
    their parent.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in level order."""
        return levelorder(self.root)

    @staticmethod
    def _steps(position: int) -> str:
        """Return the path to a 1-based level-order position: '0' is left, '1' is right."""
        return bin(position)[3:]

    def _node_at(self, position: int) -> Node:
        node = self.root
        for step in self._steps(position):
            node = node.right if step == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node that holds it once it has risen."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        steps = self._steps(self._size + 1)
        parent = self.root
        for step in steps[:-1]:
            parent = parent.right if step == "1" else parent.left
        node = Node(value, parent)
        if steps[-1] == "1":
            parent.right = node
        else:
            parent.left = node
        self._size += 1
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        The last node of the bottom level moves its value to the root, which
        then sinks towards the larger child while it does not exceed it.

        Raises:
            IndexError: if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        if self._size == 1:
            self.root = None
            self._size = 0
            return top
        last = self._node_at(self._size)
        self.root.value = last.value
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self._size -= 1
        self._sift_down()
        return top

    def _sift_down(self) -> None:
        node = self.root
        while node is not None and node.left is not None:
            if node.right is None or node.left.value > node.right.value:
                child = node.left
            else:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Extract every value, largest first; the heap is left empty."""
        return [self.extract() for _ in range(self._size)]