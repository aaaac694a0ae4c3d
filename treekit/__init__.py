"""Linked binary trees: nodes, traversals, rotations, checks, ASCII drawing, BST, AVL tree and max-heap."""

__version__ = "0.1.0"