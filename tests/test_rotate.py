import pytest

from treekit.node import Node
from treekit.rotate import rotate_left, rotate_right
from treekit.traversal import inorder, preorder


def test_rotate_left_sequence():
    root = Node(98)
    root.right = Node(128, root)
    root.right.right = Node(402, root.right)

    root = rotate_left(root)
    assert root.value == 128
    assert root.parent is None
    assert root.left.value == 98 and root.left.parent is root
    assert root.right.value == 402 and root.right.parent is root
    assert root.left.right is None

    root.right.right = Node(450, root.right)
    root.right.left = Node(420, root.right)
    root = rotate_left(root)
    assert list(preorder(root)) == [402, 128, 98, 420, 450]
    assert root.parent is None
    assert root.left.value == 128
    assert root.left.right.value == 420
    assert root.left.right.parent is root.left
    assert root.left.parent is root
    assert root.right.value == 450


def test_rotate_right_sequence():
    root = Node(98)
    root.left = Node(64, root)
    root.left.left = Node(32, root.left)

    root = rotate_right(root)
    assert root.value == 64
    assert root.parent is None
    assert root.left.value == 32
    assert root.right.value == 98 and root.right.parent is root

    root.left.left = Node(20, root.left)
    root.left.right = Node(56, root.left)
    root = rotate_right(root)
    assert list(preorder(root)) == [32, 20, 64, 56, 98]
    assert root.right.left.value == 56
    assert root.right.left.parent is root.right
    assert root.right.parent is root


def test_rotation_relinks_grandparent():
    top = Node(10)
    top.left = Node(5, top)
    top.left.right = Node(7, top.left)
    pivot = rotate_left(top.left)
    assert top.left is pivot
    assert pivot.parent is top
    assert pivot.value == 7
    assert pivot.left.value == 5


def test_rotation_keeps_inorder():
    root = Node(2)
    root.left = Node(1, root)
    root.right = Node(4, root)
    root.right.left = Node(3, root.right)
    root.right.right = Node(5, root.right)
    before = list(inorder(root))
    root = rotate_left(root)
    assert list(inorder(root)) == before
    root = rotate_right(root)
    assert list(inorder(root)) == before


def test_rotate_without_child_raises():
    leaf = Node(1)
    with pytest.raises(ValueError):
        rotate_left(leaf)
    with pytest.raises(ValueError):
        rotate_right(leaf)
    with pytest.raises(ValueError):
        rotate_left(None)