"""Listing the strings of a search tree that start with a given prefix."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from algokit.bst import BinarySearchTree, Node

SEPARATOR = " "


def _compare_head(text: str, prefix: str) -> int:
    """Compare the first ``len(prefix)`` characters of ``text`` with ``prefix``."""
    head = text[: len(prefix)]
    return (head > prefix) - (head < prefix)


def items_with_prefix(tree: BinarySearchTree, prefix: str) -> Iterator[str]:
    """Yield the items of ``tree`` that start with ``prefix``.

    Subtrees whose bounding ancestors show that no item in them can carry the
    prefix are skipped. Items come in pre-order, not sorted.
    """
    stack: list[tuple[Node | None, Node | None, Node | None]] = [
        (tree.root, None, None)
    ]
    while stack:
        node, lower, upper = stack.pop()
        if node is None:
            continue
        if lower is not None and _compare_head(lower.item, prefix) > 0:
            continue
        if upper is not None and _compare_head(upper.item, prefix) < 0:
            continue
        if node.item.startswith(prefix):
            yield node.item
        stack.append((node.right, node, upper))
        stack.append((node.left, lower, node))


def write_prefixed(
    tree: BinarySearchTree, prefix: str, stream: TextIO | None = None
) -> int:
    """Write each item starting with ``prefix``, followed by a space.

    Writes to standard output when no stream is given; returns the number of
    items written.
    """
    out = sys.stdout if stream is None else stream
    written = 0
    for item in items_with_prefix(tree, prefix):
        out.write(item + SEPARATOR)
        written += 1
    return written