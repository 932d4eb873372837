"""A set of small integers with constant-time add, discard and lookup."""

from __future__ import annotations


class SparseSet:
    """Holds up to ``capacity`` distinct integers from 1 to ``universe``.

    A sparse array maps each value to a slot in a dense array, and the dense
    array points back at the value. Neither array needs clearing: a value is
    present only when both sides agree and its slot is in use.
    """

    def __init__(self, universe: int, capacity: int) -> None:
        if universe < 0 or capacity < 0:
            raise ValueError("universe and capacity must not be negative")
        self._universe = universe
        self._sparse = [0] * universe
        self._dense = [0] * capacity
        self._count = 0

    def _slot(self, value: int) -> int | None:
        if not 1 <= value <= self._universe:
            return None
        slot = self._sparse[value - 1]
        if slot < self._count and self._dense[slot] == value:
            return slot
        return None

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self._slot(value) is not None

    def __len__(self) -> int:
        return self._count

    def add(self, value: int) -> bool:
        """Store ``value``; return False if it was present or the set is full.

        Raises ValueError when ``value`` lies outside 1..universe.
        """
        if not 1 <= value <= self._universe:
            raise ValueError(f"value out of range: {value}")
        if self._slot(value) is not None or self._count == len(self._dense):
            return False
        self._dense[self._count] = value
        self._sparse[value - 1] = self._count
        self._count += 1
        return True

    def discard(self, value: int) -> None:
        """Remove ``value`` if it is present."""
        slot = self._slot(value)
        if slot is None:
            return
        last = self._dense[self._count - 1]
        self._dense[slot] = last
        self._sparse[last - 1] = slot
        self._count -= 1