"""Finding two exchanged items in a search tree by tracking value bounds."""

from __future__ import annotations

from typing import NamedTuple

from algokit.bst import BinarySearchTree, Node


class _Bound(NamedTuple):
    """A node that bounds a subtree, with the bounds that apply to it."""

    node: Node | None = None
    lower: Node | None = None
    upper: Node | None = None


def _violates(node: Node, lower: Node | None, upper: Node | None) -> bool:
    return (lower is not None and node.item <= lower.item) or (
        upper is not None and node.item >= upper.item
    )


def _sane(node: Node | None, lower: Node | None, upper: Node | None) -> bool:
    if node is None:
        return True
    if _violates(node, lower, upper):
        return False
    return _sane(node.left, lower, node) and _sane(node.right, node, upper)


def labels_are_sane(tree: BinarySearchTree) -> bool:
    """Tell whether every item lies strictly within the bounds its ancestors set."""
    return _sane(tree.root, None, None)


def _find_next(
    node: Node | None, lower: Node | None, upper: Node | None, searchee
) -> Node | None:
    """Follow the search path of ``searchee`` and return the first violator."""
    while node is not None:
        if _violates(node, lower, upper):
            return node
        if searchee < node.item:
            upper, node = node, node.left
        else:
            lower, node = node, node.right
    return None


def _both_swapped(target: Node, bound: _Bound) -> bool:
    """Tell whether exchanging ``target`` with the bounding node fixes its subtree."""
    if bound.lower is not None and target.item <= bound.lower.item:
        return False
    if bound.upper is not None and target.item >= bound.upper.item:
        return False
    BinarySearchTree.swap_items(target, bound.node)
    sanity = _sane(bound.node, None, None)
    BinarySearchTree.swap_items(target, bound.node)
    return sanity


def _search(
    root: Node, node: Node | None, lower: _Bound, upper: _Bound
) -> tuple[Node, Node] | None:
    if node is None:
        return None
    if lower.node is not None and node.item <= lower.node.item:
        if _both_swapped(node, lower):
            return node, lower.node
        second = _find_next(node.right, node, upper.node, lower.node.item)
        if second is not None:
            return lower.node, second
        second = _find_next(root, None, None, node.item)
        if second is None:
            raise ValueError("cannot find the next error")
        return node, second
    if upper.node is not None and node.item >= upper.node.item:
        if _both_swapped(node, upper):
            return node, upper.node
        second = _find_next(node.left, lower.node, node, upper.node.item)
        if second is not None:
            return upper.node, second
        second = _find_next(root, None, None, node.item)
        if second is None:
            raise ValueError("cannot find the next error")
        return node, second
    here = _Bound(node, lower.node, upper.node)
    found = _search(root, node.left, lower, here)
    if found is not None:
        return found
    return _search(root, node.right, here, upper)


def find_swapped_by_bounds(tree: BinarySearchTree) -> tuple[Node, Node]:
    """Find the two nodes whose items were exchanged, using value intervals.

    Raises ValueError when no node lies outside its interval.
    """
    if tree.root is None:
        raise ValueError("no swapped pair in the tree")
    found = _search(tree.root, tree.root, _Bound(), _Bound())
    if found is None:
        raise ValueError("no swapped pair in the tree")
    return found


def repair_by_bounds(tree: BinarySearchTree) -> None:
    """Restore a tree in which the items of two nodes were exchanged."""
    BinarySearchTree.swap_items(*find_swapped_by_bounds(tree))