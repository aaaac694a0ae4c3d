import pytest

from treekit.bst import BinarySearchTree
from treekit.properties import is_bst
from treekit.traversal import preorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _links_consistent(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _links_consistent(node.left, node) and _links_consistent(node.right, node)


def test_insert_returns_new_nodes():
    tree = BinarySearchTree()
    inserted = [tree.insert(v).value for v in (98, 402, 12, 46, 128, 256, 512, 1)]
    assert inserted == [98, 402, 12, 46, 128, 256, 512, 1]
    assert tree.insert(128) is None
    assert list(preorder(tree.root)) == [98, 12, 1, 46, 402, 128, 256, 512]
    assert _links_consistent(tree.root)


def test_build_from_values():
    tree = BinarySearchTree(ARRAY)
    assert list(preorder(tree.root)) == [
        79, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 84, 91, 98, 95,
    ]
    assert list(tree) == sorted(ARRAY)
    assert len(tree) == 16
    assert is_bst(tree.root)


def test_build_skips_duplicates():
    tree = BinarySearchTree([5, 3, 5, 8, 3])
    assert list(preorder(tree.root)) == [5, 3, 8]


def test_search():
    tree = BinarySearchTree(ARRAY)
    found = tree.search(32)
    assert found.value == 32
    assert list(preorder(found)) == [32, 22, 34]
    assert tree.search(512) is None
    assert 62 in tree
    assert 512 not in tree


def test_remove_sequence():
    tree = BinarySearchTree(ARRAY)
    tree.remove(79)
    assert list(preorder(tree.root)) == [
        84, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 91, 98, 95,
    ]
    tree.remove(21)
    assert list(preorder(tree.root)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 68, 62, 87, 91, 98, 95,
    ]
    tree.remove(68)
    assert list(preorder(tree.root)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 62, 87, 91, 98, 95,
    ]
    assert is_bst(tree.root)
    assert _links_consistent(tree.root)


def test_remove_missing_raises():
    tree = BinarySearchTree([2, 1, 3])
    with pytest.raises(KeyError):
        tree.remove(7)
    assert list(preorder(tree.root)) == [2, 1, 3]


def test_remove_root_with_one_child():
    tree = BinarySearchTree([2, 5])
    tree.remove(2)
    assert tree.root.value == 5
    assert tree.root.parent is None


def test_remove_last_node_empties_tree():
    tree = BinarySearchTree([4])
    tree.remove(4)
    assert tree.root is None
    assert len(tree) == 0