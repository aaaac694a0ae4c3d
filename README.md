# treekit

treekit provides linked binary trees in plain Python. Each `Node` holds an integer `value` and links to its `parent`, `left` and `right` nodes. The package builds on these nodes in several ways:

- traversals
- rotations
- measurements and structural checks
- three trees that keep themselves in order: a binary search tree, an AVL tree and a max binary heap

It can also draw any tree as ASCII art.

## Installation

```
pip install .
```

To run the test suite with pytest, install with `pip install .[test]`.

## Building trees by hand

```python
from treekit.node import Node, insert_left, insert_right, delete
from treekit.printing import print_tree, render

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root.left, 54)
insert_right(root, 128)

print_tree(root)
text = render(root)
```

Creating a `Node` with a `parent` does not attach it to that parent. You set the parent's `left` or `right` link yourself.

`insert_left` and `insert_right` put a new node in the child slot and return it. If a child was already in that slot, it moves down to the same side of the new node. Both functions raise `ValueError` when the parent is `None`.

`delete(tree)` takes apart a subtree. It detaches the subtree from the node above it and clears the links of every node inside it.

`render(tree)` returns the drawing as a string, with no trailing newline. For an empty tree it returns an empty string. `print_tree(tree)` prints that drawing. Each value is shown as `(%03d)`, for example `(098)`.

## Traversals and rotations

```python
from treekit.traversal import preorder, inorder, postorder, levelorder
from treekit.rotate import rotate_left, rotate_right

list(inorder(root))
list(levelorder(root))
new_root = rotate_left(root)
```

Each traversal is a generator of node values. An empty tree (`None`) yields nothing.

`rotate_left` and `rotate_right` return the new root of the rotated subtree. They also relink the parent above it. They raise `ValueError` when the node lacks the child the rotation needs.

## Measuring and checking trees

`treekit.properties` provides these functions.

Measurements:

- `height` counts edges on the longest downward path.
- `depth` counts edges up to the root.
- `size`, `leaves` and `internal_nodes` count nodes.
- `balance` gives the left subtree height minus the right subtree height.

Checks (each returns `False` for `None`):

- `is_leaf`, `is_root`
- `is_full`, `is_perfect`, `is_complete`
- `is_bst`, `is_avl`, `is_heap`

`is_bst` and `is_avl` treat duplicate values as invalid. `is_heap` requires every parent to be strictly greater than its children.

Relatives:

- `sibling`, `uncle` and `lowest_common_ancestor` return a node, or `None` when there is none.

```python
from treekit.properties import height, is_bst, lowest_common_ancestor

height(root)
is_bst(root)
lowest_common_ancestor(root.left, root.right)
```

## Search trees and heaps

```python
from treekit.bst import BinarySearchTree
from treekit.avl import AVLTree
from treekit.heap import MaxHeap

values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]

bst = BinarySearchTree(values)
bst.search(32)         # the node holding 32, or None
bst.remove(79)         # KeyError if the value is absent
32 in bst, len(bst), list(bst)

avl = AVLTree(values)
avl.insert(50)
avl.remove(47)         # an absent value is ignored
balanced = AVLTree.from_sorted(sorted(values))

heap = MaxHeap(values)
heap.extract()         # 98; IndexError on an empty heap
heap.to_sorted_list()  # remaining values, largest first; empties the heap
```

Each tree exposes its top node as `root`, so you can pass it to the functions above. For example: `print_tree(avl.root)`.

`BinarySearchTree` and `AVLTree` ignore duplicate values. For these, `insert` returns `None`. Iterating over either tree yields its values in order.

When you remove a value whose node has two children, the node takes the value of its in-order successor. The successor's node is then removed instead. After each removal, `AVLTree` rebalances the whole tree.

`AVLTree.from_sorted` takes the lower middle element as the root of each subtree.

Iterating over a `MaxHeap` yields its values in level order.

## Scope

treekit is a library only. It has no command-line program. It does not save trees to disk or load them back. Trees live only as linked `Node` objects in memory.