"""Unbalanced binary search tree without duplicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


def _insert(node: _Node | None, value: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    added = False
    if value < node.data:
        node.left, added = _insert(node.left, value)
    elif value > node.data:
        node.right, added = _insert(node.right, value)
    return node, added


def _delete(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.data:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if value > node.data:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if node.right is None:
        return node.left, True
    if node.left is None:
        return node.right, True
    successor = node.right
    while successor.left:
        successor = successor.left
    node.data = successor.data
    node.right, _ = _delete(node.right, successor.data)
    return node, True


class BinarySearchTree:
    """A set of values kept in a plain binary search tree."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a value; duplicates are ignored."""
        self._root, added = _insert(self._root, value)
        if added:
            self._size += 1

    def remove(self, value: Any) -> None:
        """Remove a value; absent values are ignored."""
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1

    def search(self, value: Any) -> bool:
        """Return whether ``value`` is stored in the tree."""
        node = self._root
        while node:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return True
        return False

    def inorder(self) -> list:
        """Return the values in ascending order."""
        return list(self)

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while node or stack:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Build a tree, search it, and delete a value."""
    tree = BinarySearchTree([6, 4, 125, 22, 23, 21, 68, 21, 66])
    print("Inorder of the tree is")
    print(" ".join(map(str, tree.inorder())))
    target = 26
    if tree.search(target):
        print(f"Found the value {target}")
    else:
        print("Not present")
    print("delete 22")
    tree.remove(22)
    print("Inorder of the tree is")
    print(" ".join(map(str, tree.inorder())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())