"""An unbalanced binary search tree and helpers built on in-order traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """A tree node; nodes compare by identity."""

    item: Any
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


class BinarySearchTree:
    """Binary search tree that keeps duplicates in the right subtree."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for item in items:
            self.insert(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in self.nodes())

    def insert(self, value: Any) -> Node:
        """Insert ``value`` below the node it belongs under and return its node."""
        self._size += 1
        if self.root is None:
            self.root = Node(value)
            return self.root
        parent = self.root
        while True:
            if value < parent.item:
                if parent.left is None:
                    parent.left = Node(value, parent)
                    return parent.left
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = Node(value, parent)
                    return parent.right
                parent = parent.right

    def search(self, value: Any) -> Node | None:
        """Return the node holding ``value``, or None when there is none."""
        node = self.root
        while node is not None:
            if node.item == value:
                return node
            node = node.left if value < node.item else node.right
        return None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes in order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def max_depth(self) -> int:
        """Return the depth of the deepest node; the root has depth 0."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest

    def is_ordered(self) -> bool:
        """Tell whether the in-order sequence of items never decreases."""
        return all(not later < earlier for earlier, later in pairwise(self))

    @staticmethod
    def swap_items(first: Node, second: Node) -> None:
        """Exchange the items held by two nodes."""
        first.item, second.item = second.item, first.item

    def find_swapped(self) -> tuple[Node, Node]:
        """Find the two nodes whose items were exchanged.

        Raises ValueError when the in-order sequence shows no violation.
        """
        first = second = None
        previous: Node | None = None
        for node in self.nodes():
            if previous is not None and node.item < previous.item:
                if first is None:
                    first, second = previous, node
                else:
                    second = node
                    break
            previous = node
        if first is None or second is None:
            raise ValueError("no swapped pair in the tree")
        return first, second

    def repair_swapped(self) -> None:
        """Restore the order of a tree in which two items were exchanged."""
        self.swap_items(*self.find_swapped())


def merge_sorted(first: BinarySearchTree, second: BinarySearchTree) -> list:
    """Merge the in-order items of two trees, walking both at once."""
    result: list = []
    left, right = iter(first), iter(second)
    sentinel = object()
    a, b = next(left, sentinel), next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            result.append(a)
            a = next(left, sentinel)
        else:
            result.append(b)
            b = next(right, sentinel)
    if a is not sentinel:
        result.append(a)
        result.extend(left)
    if b is not sentinel:
        result.append(b)
        result.extend(right)
    return result


def merge_by_insertion(first: BinarySearchTree, second: BinarySearchTree) -> list:
    """Lay out the first tree's items, then slot each of the second's in after
    every item not greater than it."""
    base = list(first)
    result: list = []
    position = 0
    for item in second:
        while position < len(base) and base[position] <= item:
            result.append(base[position])
            position += 1
        result.append(item)
    result.extend(base[position:])
    return result