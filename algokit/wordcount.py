"""Collecting the distinct words of a text with several dictionary structures."""

from __future__ import annotations

import abc
import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable, Iterator, Sequence, TextIO

from algokit.bst import BinarySearchTree
from algokit.hash_table import HashTable
from algokit.linked_list import SinglyLinkedList
from algokit.red_black import RedBlackTree


class WordStore(abc.ABC):
    """A collection of distinct words; ``name`` names its output file."""

    name: str = "words"

    @abc.abstractmethod
    def add(self, word: str) -> None:
        """Store ``word`` unless it is already present."""

    @abc.abstractmethod
    def words(self) -> Iterator[str]:
        """Yield the stored words."""


class ListStore(WordStore):
    """Words in a singly linked list, newest first."""

    name = "singly-linked-list-result"

    def __init__(self) -> None:
        self._list = SinglyLinkedList()

    def add(self, word: str) -> None:
        if word not in self._list:
            self._list.insert(word)

    def words(self) -> Iterator[str]:
        return iter(self._list)


class TreeStore(WordStore):
    """Words in an unbalanced binary search tree, in sorted order."""

    name = "binary-serach-tree-result"

    def __init__(self) -> None:
        self._tree = BinarySearchTree()

    def add(self, word: str) -> None:
        if self._tree.search(word) is None:
            self._tree.insert(word)

    def words(self) -> Iterator[str]:
        return iter(self._tree)


class RedBlackStore(WordStore):
    """Words in a red-black tree, in sorted order."""

    name = "red-black-tree-result"

    def __init__(self) -> None:
        self._tree = RedBlackTree()

    def add(self, word: str) -> None:
        self._tree.insert(word)

    def words(self) -> Iterator[str]:
        return iter(self._tree)


class HashStore(WordStore):
    """Words in a chained hash table."""

    name = "hash-table-result"

    def __init__(self) -> None:
        self._table = HashTable()

    def add(self, word: str) -> None:
        self._table.add(word)

    def words(self) -> Iterator[str]:
        return iter(self._table)


def count_words(text: str, store: WordStore, directory: str | Path = ".") -> Path:
    """Add every whitespace-separated word of ``text`` to ``store``.

    The stored words are then written one per line to ``<store.name>.txt``
    in ``directory``; the path of that file is returned.
    """
    for word in text.split():
        store.add(word)
    path = Path(directory) / f"{store.name}.txt"
    with path.open("w", encoding="utf-8") as out:
        for word in store.words():
            out.write(word + "\n")
    return path


def timed(label: str, func: Callable[[], Any], stream: TextIO) -> int:
    """Run ``func``, report its running time to ``stream``, return milliseconds."""
    start = time.perf_counter_ns()
    func()
    elapsed = (time.perf_counter_ns() - start) // 1_000_000
    stream.write(f"Elapsed time for {label}:{elapsed:,} milliseconds.\n")
    return elapsed


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time several structures collecting the distinct words of a text."
    )
    parser.add_argument("input", nargs="?", default="some-text.txt")
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print("cannot open file", file=sys.stderr)
        return 1

    directory = Path(args.output_dir)
    try:
        timings = (directory / "result-time.txt").open("w", encoding="utf-8")
    except OSError:
        print("cannot operate file", file=sys.stderr)
        return 1

    with timings:
        for store in (ListStore(), TreeStore(), RedBlackStore(), HashStore()):
            timed(
                store.name,
                lambda store=store: count_words(text, store, directory),
                timings,
            )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())