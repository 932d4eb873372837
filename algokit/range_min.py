"""Range minimum queries: a constant-time table and a segment tree."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import Iterable


class PrefixMinTable:
    """Answers range minimum queries in O(1) after O(n^2) preparation."""

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        self._rows = [
            list(accumulate(items[start:], min)) for start in range(len(items))
        ]

    def min(self, start: int, end: int):
        """Return the smallest value between ``start`` and ``end`` inclusive."""
        if not 0 <= start <= end < len(self._rows):
            raise ValueError("Not valid")
        return self._rows[start][end - start]


class MinSegmentTree:
    """Answers range minimum queries in O(log n)."""

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(items)
        self._tree = [math.inf] * (4 * self._size)
        self._build(items, 1, 0, self._size - 1)

    def _build(self, items, pos: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[pos] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * pos, lo, mid)
        self._build(items, 2 * pos + 1, mid + 1, hi)
        self._tree[pos] = min(self._tree[2 * pos], self._tree[2 * pos + 1])

    def _query(self, pos: int, lo: int, hi: int, left: int, right: int):
        if left > right:
            return math.inf
        if left == lo and right == hi:
            return self._tree[pos]
        mid = (lo + hi) // 2
        return min(
            self._query(2 * pos, lo, mid, left, min(right, mid)),
            self._query(2 * pos + 1, mid + 1, hi, max(left, mid + 1), right),
        )

    def query(self, left: int, right: int):
        """Return the smallest value between ``left`` and ``right`` inclusive."""
        if not 0 <= left <= right < self._size:
            raise ValueError("invalid range")
        return self._query(1, 0, self._size - 1, left, right)