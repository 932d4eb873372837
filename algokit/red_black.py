"""A red-black tree of distinct keys."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Iterator


class Color(enum.Enum):
    RED = "red"
    BLACK = "black"


class _Node:
    __slots__ = ("key", "color", "parent", "left", "right")

    def __init__(self, key: Any, parent: _Node | None = None) -> None:
        self.key = key
        self.color = Color.RED
        self.parent = parent
        self.left: _Node | None = None
        self.right: _Node | None = None

    def __repr__(self) -> str:
        return f"_Node({self.key!r}, {self.color.name})"


def _color(node: _Node | None) -> Color:
    return Color.BLACK if node is None else node.color


class RedBlackTree:
    """Self-balancing search tree; inserting a key already present does nothing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: _Node | None = None
        for item in items:
            self.insert(item)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None

    def search(self, key: Any) -> _Node | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    @staticmethod
    def _leftmost(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: _Node) -> _Node:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> _Node | None:
        """Return the node with the smallest key, or None for an empty tree."""
        return None if self.root is None else self._leftmost(self.root)

    def maximum(self) -> _Node | None:
        """Return the node with the largest key, or None for an empty tree."""
        return None if self.root is None else self._rightmost(self.root)

    def successor(self, node: _Node) -> _Node | None:
        """Return the node that follows ``node`` in order, or None."""
        if node.right is not None:
            return self._leftmost(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self, node: _Node) -> _Node | None:
        """Return the node that precedes ``node`` in order, or None."""
        if node.left is not None:
            return self._rightmost(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        parent: _Node | None = None
        node = self.root
        while node is not None:
            if key == node.key:
                return False
            parent = node
            node = node.left if key < node.key else node.right
        new = _Node(key, parent)
        if parent is None:
            self.root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._fix_after_insert(new)
        return True

    def _fix_after_insert(self, node: _Node) -> None:
        while node.parent is not None and node.parent.color is Color.RED:
            parent = node.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.right:
                uncle = grand.left
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    uncle.color = parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_left(node.parent.parent)
            else:
                uncle = grand.right
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    uncle.color = parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_right(node.parent.parent)
        assert self.root is not None
        self.root.color = Color.BLACK