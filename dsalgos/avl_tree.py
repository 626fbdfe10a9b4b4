"""Self-balancing AVL binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_DEMO_KEYS = (10, 20, 30, 40, 50, 25)


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class AVLTree:
    """An AVL tree holding unique, mutually comparable keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert a key; return False if it was already present."""
        self._root, added = self._insert(self._root, key)
        if added:
            self._size += 1
        return added

    def _insert(self, node: _Node | None, key: Any) -> tuple[_Node, bool]:
        if node is None:
            return _Node(key), True
        if key < node.key:
            node.left, added = self._insert(node.left, key)
        elif key > node.key:
            node.right, added = self._insert(node.right, key)
        else:
            return node, False

        _update_height(node)
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

    def preorder(self) -> Iterator[Any]:
        """Yield keys in preorder: node, left subtree, right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Build a tree from the given keys and print its preorder traversal."""
    parser = argparse.ArgumentParser(
        description="Build an AVL tree and print its preorder traversal."
    )
    parser.add_argument("keys", nargs="*", type=int, help="keys to insert")
    args = parser.parse_args(argv)
    tree = AVLTree(args.keys or _DEMO_KEYS)
    print("Preorder traversal of the constructed AVL tree is ")
    print(" ".join(str(key) for key in tree.preorder()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())