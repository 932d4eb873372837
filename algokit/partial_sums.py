"""Prefix sums with point updates, both in O(log n)."""

from __future__ import annotations

from typing import Iterable


class PartialSums:
    """Implicit search tree over indices; each node keeps its left-subtree sum."""

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        self._sums = [0] * len(items)
        self._build(items, 0, len(items) - 1)

    @staticmethod
    def _mid(lo: int, hi: int) -> int:
        return (lo + hi) // 2

    def _build(self, items, lo: int, hi: int):
        if hi < lo:
            return 0
        mid = self._mid(lo, hi)
        self._sums[mid] = items[mid] + self._build(items, lo, mid - 1)
        return self._sums[mid] + self._build(items, mid + 1, hi)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._sums):
            raise ValueError("invalid_argument")

    def add(self, index: int, amount: float) -> None:
        """Add ``amount`` to the value at ``index``."""
        self._check(index)
        lo, hi = 0, len(self._sums) - 1
        while (mid := self._mid(lo, hi)) != index:
            if index < mid:
                self._sums[mid] += amount
                hi = mid - 1
            else:
                lo = mid + 1
        self._sums[index] += amount

    def prefix_sum(self, index: int):
        """Return the sum of the values at positions 0 through ``index``."""
        self._check(index)
        total = 0
        lo, hi = 0, len(self._sums) - 1
        while (mid := self._mid(lo, hi)) != index:
            if index < mid:
                hi = mid - 1
            else:
                total += self._sums[mid]
                lo = mid + 1
        return total + self._sums[index]