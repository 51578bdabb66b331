"""Self-balancing AVL search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _Node | None, key: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node), added
    if balance < -1 and key > node.right.key:
        return _rotate_left(node), added
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


def _min_node(node: _Node) -> _Node:
    while node.left:
        node = node.left
    return node


def _delete(node: _Node | None, key: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        removed = True
        if node.left is None or node.right is None:
            node = node.left or node.right
        else:
            successor = _min_node(node.right)
            node.key = successor.key
            node.right, _ = _delete(node.right, successor.key)

    if node is None:
        return None, removed

    _update(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node), removed
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), removed
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node), removed
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), removed
    return node, removed


class AVLTree:
    """A set of keys kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add a key; duplicates are ignored."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1

    def remove(self, key: Any) -> None:
        """Remove a key; absent keys are ignored."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1

    def in_order(self) -> list:
        """Return the keys in ascending order."""
        return list(self)

    def height_of(self, key: Any) -> int:
        """Return the height of the subtree rooted at ``key``."""
        node = self._root
        while node:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.height
        raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        try:
            self.height_of(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while node or stack:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Build a small tree, show it, and delete a key."""
    tree = AVLTree()
    for key in (20, 4, 15, 70, 50, 100, 80):
        tree.insert(key)
    print("In-order traversal:", " ".join(map(str, tree.in_order())))
    print(f"Height of subtree rooted at 70: {tree.height_of(70)}")
    tree.remove(70)
    print("After deleting 70:", " ".join(map(str, tree.in_order())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())