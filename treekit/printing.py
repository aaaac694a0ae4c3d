"""ASCII rendering of binary trees."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def _put(row: list[str], pos: int, char: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _draw(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _height(tree: Node) -> int:
    lower = [_height(child) + 1 for child in (tree.left, tree.right) if child is not None]
    return max(lower, default=0)


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as lines of text, without a trailing newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[" "] * 255 for _ in range(_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    # The first two columns are never trimmed.
    return "\n".join("".join(row[:2]) + "".join(row[2:]).rstrip() for row in rows)


def print_tree(tree: Optional[Node]) -> None:
    """Print the tree to standard output; print nothing for an empty tree."""
    if tree is None:
        return
    print(render(tree))