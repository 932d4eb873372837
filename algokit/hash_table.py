"""A chained hash table of distinct values."""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator

from algokit.linked_list import SinglyLinkedList

TABLE_SIZE = 1 << 12


class HashTable:
    """Hash set with a fixed number of chained buckets.

    Iteration visits buckets in the order they first received a value, and
    each bucket from its newest value to its oldest.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._buckets = [SinglyLinkedList() for _ in range(TABLE_SIZE)]
        self._used: list[SinglyLinkedList] = []
        self.update(items)

    def _bucket(self, value: Hashable) -> SinglyLinkedList:
        return self._buckets[hash(value) % TABLE_SIZE]

    def __iter__(self) -> Iterator[Hashable]:
        for bucket in self._used:
            yield from bucket

    def __contains__(self, value: object) -> bool:
        try:
            bucket = self._bucket(value)  # type: ignore[arg-type]
        except TypeError:
            return False
        return value in bucket

    def add(self, value: Hashable) -> None:
        """Store ``value`` unless it is already present."""
        bucket = self._bucket(value)
        if value in bucket:
            return
        if not len(bucket):
            self._used.append(bucket)
        bucket.insert(value)

    def update(self, values: Iterable[Hashable]) -> None:
        """Store every value of ``values``."""
        for value in values:
            self.add(value)