"""Binary tree node and the basic operations that build and tear down trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a binary tree holding an integer value and links to its relatives.

    Creating a node does not attach it to ``parent``; the caller links it
    in as the left or right child.
    """

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node holding ``value`` as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node holding ``value`` as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Optional[Node]) -> None:
    """Dismantle the subtree rooted at ``tree``, unlinking every node in it.

    The subtree is also detached from the node above it, if any.
    """
    if tree is None:
        return
    above = tree.parent
    if above is not None:
        if above.left is tree:
            above.left = None
        if above.right is tree:
            above.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None