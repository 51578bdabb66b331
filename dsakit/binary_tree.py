"""Binary tree nodes, node statistics and traversals."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        yield node
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)


def _children(node: TreeNode) -> int:
    return (node.left is not None) + (node.right is not None)


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(root))


def count_full_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes with two children."""
    return sum(1 for node in _nodes(root) if _children(node) == 2)


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes with no children."""
    return sum(1 for node in _nodes(root) if _children(node) == 0)


def count_degree_one(root: TreeNode | None) -> int:
    """Return the number of nodes with exactly one child."""
    return sum(1 for node in _nodes(root) if _children(node) == 1)


def total_value(root: TreeNode | None) -> Any:
    """Return the sum of all node values."""
    return sum(node.value for node in _nodes(root))


def height(root: TreeNode | None) -> int:
    """Return the number of levels; an empty tree has height 0."""
    levels = 0
    level = [root] if root else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return levels


def level_order(root: TreeNode | None) -> list:
    """Return the values level by level, left to right."""
    result = []
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return result


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` in search-tree order and return the root.

    Values equal to a node go into its right subtree.
    """
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def build_bst(values: Iterable) -> TreeNode | None:
    """Insert each value in turn into an empty search tree and return the root."""
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def preorder(root: TreeNode | None) -> list:
    """Return the values in root, left, right order."""
    return [node.value for node in _nodes(root)]


def inorder(root: TreeNode | None) -> list:
    """Return the values in left, root, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node or stack:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: TreeNode | None) -> list:
    """Return the values in left, right, root order."""
    pending = [root] if root else []
    reverse = []
    while pending:
        node = pending.pop()
        reverse.append(node.value)
        if node.left:
            pending.append(node.left)
        if node.right:
            pending.append(node.right)
    reverse.reverse()
    return reverse


def _sample_tree() -> TreeNode:
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6, None, TreeNode(9)), TreeNode(7, TreeNode(8))),
    )


def _show(values: list) -> str:
    return " ".join(map(str, values))


def main(argv: list[str] | None = None) -> int:
    """Report on a search tree built from integer arguments, or on a sample tree."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        try:
            root = build_bst(int(arg) for arg in args)
        except ValueError as exc:
            print(f"invalid value: {exc}", file=sys.stderr)
            return 2
    else:
        root = _sample_tree()
    print(f"Total number of nodes: {count_nodes(root)}")
    print(f"Nodes with two children: {count_full_nodes(root)}")
    print(f"Sum of all values: {total_value(root)}")
    print(f"Height: {height(root)}")
    print(f"Total number of leaves: {count_leaves(root)}")
    print(f"Nodes with one child: {count_degree_one(root)}")
    print(f"Level order: {_show(level_order(root))}")
    print(f"Inorder Traversal: {_show(inorder(root))}")
    print(f"Preorder Traversal: {_show(preorder(root))}")
    print(f"Postorder Traversal: {_show(postorder(root))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())