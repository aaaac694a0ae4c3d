"""Left and right rotations of a binary tree around a node."""

from __future__ import annotations

from treekit.node import Node


def _relink_parent(old: Node, new: Node, above: Node | None) -> None:
    new.parent = above
    if above is not None:
        if above.left is old:
            above.left = new
        else:
            above.right = new


def rotate_left(tree: Node) -> Node:
    """Rotate left around ``tree`` and return the new subtree root.

    The right child of ``tree`` becomes the root of the subtree.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    above = tree.parent
    tree.parent = pivot
    _relink_parent(tree, pivot, above)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate right around ``tree`` and return the new subtree root.

    The left child of ``tree`` becomes the root of the subtree.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    above = tree.parent
    tree.parent = pivot
    _relink_parent(tree, pivot, above)
    return pivot