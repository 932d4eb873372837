"""Rebuilding a search tree into height-balanced shape, and checking balance."""

from __future__ import annotations

from typing import Any, Sequence

from algokit.bst import BinarySearchTree, Node


def _build(items: Sequence[Any], lo: int, hi: int) -> Node | None:
    if hi < lo:
        return None
    mid = (lo + hi) // 2
    node = Node(items[mid])
    node.left = _build(items, lo, mid - 1)
    node.right = _build(items, mid + 1, hi)
    for child in (node.left, node.right):
        if child is not None:
            child.parent = node
    return node


def build_height_balanced(tree: BinarySearchTree) -> BinarySearchTree:
    """Return a new tree with the same items, built around medians.

    The sorted items are split at their median, which becomes the root; the
    halves on either side become the left and right subtrees in turn.
    """
    items = list(tree)
    balanced = BinarySearchTree()
    balanced.root = _build(items, 0, len(items) - 1)
    balanced._size = len(items)
    return balanced


def _height(node: Node | None) -> int | None:
    """Return the height of a balanced subtree, or None if it is unbalanced."""
    if node is None:
        return 0
    left = _height(node.left)
    if left is None:
        return None
    right = _height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_height_balanced(tree: BinarySearchTree) -> bool:
    """Tell whether the subtree heights at every node differ by at most one."""
    return _height(tree.root) is not None