"""Queries on the shape, ordering and relationships of binary tree nodes."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treekit.node import Node


def _children(node: Node) -> tuple[Node, ...]:
    return tuple(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Optional[Node]) -> int:
    """Count the nodes on the longest downward path; zero for an empty tree."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down from ``tree``."""
    if tree is None:
        return 0
    return max((1 + height(child) for child in _children(tree)), default=0)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and the root above it."""
    count = 0
    while node is not None and node.parent is not None:
        node = node.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    own = 1 if is_leaf(tree) else 0
    return own + leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if is_leaf(tree) else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left subtree height minus right subtree height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False

    def full(node: Optional[Node]) -> bool:
        if node is None:
            return True
        if (node.left is None) != (node.right is None):
            return False
        return full(node.left) and full(node.right)

    return full(tree)


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False

    leaf_level = 0
    probe = tree
    while not is_leaf(probe):
        probe = probe.left if probe.left is not None else probe.right
        leaf_level += 1

    def perfect(node: Node, level: int) -> bool:
        if is_leaf(node):
            return level == leaf_level
        if node.left is None or node.right is None:
            return False
        return perfect(node.left, level + 1) and perfect(node.right, level + 1)

    return perfect(tree, 0)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the parent of ``node``, if there is one."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the parent of ``node``, if there is one."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of (or equal to) both nodes.

    Returns None when either node is missing or they belong to different trees.
    """
    if first is None or second is None:
        return None
    lineage: set[Node] = set()
    node: Optional[Node] = first
    while node is not None:
        lineage.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in lineage:
            return node
        node = node.parent
    return None


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, except the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree without duplicate values."""
    if tree is None:
        return False

    def within(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.value <= low) or (high is not None and node.value >= high):
            return False
        return within(node.left, low, node.value) and within(node.right, node.value, high)

    return within(tree, None, None)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree whose every node is balanced."""
    if tree is None:
        return False

    def valid(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.value <= low) or (high is not None and node.value >= high):
            return False
        if abs(_levels(node.left) - _levels(node.right)) > 1:
            return False
        return valid(node.left, low, node.value) and valid(node.right, node.value, high)

    return valid(tree, None, None)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and every parent exceeds its children."""
    if tree is None or not is_complete(tree):
        return False

    def dominates(node: Node) -> bool:
        return all(
            node.value > child.value and dominates(child) for child in _children(node)
        )

    return dominates(tree)