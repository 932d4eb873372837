"""Allotting hotel rooms: take the lowest free room in a range, give it back."""

from __future__ import annotations

from dataclasses import dataclass


def _check_rooms(rooms: int) -> None:
    if rooms < 1:
        raise ValueError("a hotel needs at least one room")


class SegmentTreeAllotter:
    """Keeps the number of free rooms of every segment in a segment tree."""

    def __init__(self, rooms: int) -> None:
        _check_rooms(rooms)
        self._rooms = rooms
        self._free = [0] * (4 * rooms)
        self._build(0, 0, rooms - 1)

    def _build(self, index: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._free[index] = 1
            return
        mid = (lo + hi) // 2
        left, right = 2 * index + 1, 2 * index + 2
        self._build(left, lo, mid)
        self._build(right, mid + 1, hi)
        self._free[index] = self._free[left] + self._free[right]

    def _check_range(self, low: int, high: int) -> None:
        if not 0 <= low <= high < self._rooms:
            raise ValueError("invalid room range")

    def _count(self, index: int, lo: int, hi: int, low: int, high: int) -> int:
        if high < low:
            return 0
        if lo == low and hi == high:
            return self._free[index]
        mid = (lo + hi) // 2
        return self._count(2 * index + 1, lo, mid, low, min(mid, high)) + self._count(
            2 * index + 2, mid + 1, hi, max(mid + 1, low), high
        )

    def count(self, low: int, high: int) -> int:
        """Return how many rooms from ``low`` to ``high`` are free."""
        self._check_range(low, high)
        return self._count(0, 0, self._rooms - 1, low, high)

    def checkin(self, low: int, high: int) -> int | None:
        """Occupy a free room between ``low`` and ``high``; None if none found."""
        self._check_range(low, high)
        index, lo, hi = 0, 0, self._rooms - 1
        path: list[int] = []
        while lo != hi:
            mid = (lo + hi) // 2
            left, right = 2 * index + 1, 2 * index + 2
            path.append(index)
            if low <= mid and self._free[left]:
                index, hi = left, mid
                high = min(mid, high)
            elif mid < high and self._free[right]:
                index, lo = right, mid + 1
                low = max(mid + 1, low)
            else:
                return None
        if not self._free[index]:
            return None
        self._free[index] -= 1
        for node in path:
            self._free[node] -= 1
        return lo

    def checkout(self, room: int) -> bool:
        """Free ``room``; False if it was not occupied."""
        self._check_range(room, room)
        index, lo, hi = 0, 0, self._rooms - 1
        path: list[int] = []
        while lo != hi:
            mid = (lo + hi) // 2
            path.append(index)
            if room <= mid:
                index, hi = 2 * index + 1, mid
            else:
                index, lo = 2 * index + 2, mid + 1
        if self._free[index]:
            return False
        self._free[index] = 1
        for node in path:
            self._free[node] += 1
        return True


@dataclass
class _Room:
    available: bool = True
    free_on_left: int = 0


class RankTreeAllotter:
    """Implicit search tree over rooms; each node counts free rooms to its left."""

    def __init__(self, rooms: int) -> None:
        _check_rooms(rooms)
        self._nodes = [_Room() for _ in range(rooms)]
        self._build(0, rooms - 1)

    @staticmethod
    def _mid(lo: int, hi: int) -> int:
        return (lo + hi) // 2

    def _build(self, lo: int, hi: int) -> int:
        if hi < lo:
            return 0
        if lo == hi:
            return 1
        pos = self._mid(lo, hi)
        self._nodes[pos].free_on_left = self._build(lo, pos - 1)
        return self._nodes[pos].free_on_left + 1 + self._build(pos + 1, hi)

    def _check_range(self, low: int, high: int) -> None:
        if not 0 <= low <= high < len(self._nodes):
            raise ValueError("invalid room range")

    def _prefix_count(self, index: int) -> int:
        if index < 0:
            return 0
        total = 0
        lo, hi = 0, len(self._nodes) - 1
        while lo <= hi:
            pos = self._mid(lo, hi)
            if index < pos:
                hi = pos - 1
                continue
            node = self._nodes[pos]
            total += node.free_on_left + int(node.available)
            if index == pos:
                break
            lo = pos + 1
        return total

    def count(self, low: int, high: int) -> int:
        """Return how many rooms from ``low`` to ``high`` are free."""
        self._check_range(low, high)
        return self._prefix_count(high) - self._prefix_count(low - 1)

    def checkin(self, low: int, high: int) -> int | None:
        """Occupy a free room between ``low`` and ``high``; None if none found."""
        self._check_range(low, high)
        lo, hi = 0, len(self._nodes) - 1
        path: list[_Room] = []
        while lo <= hi:
            mid = self._mid(lo, hi)
            node = self._nodes[mid]
            if low < mid and node.free_on_left:
                path.append(node)
                hi = mid - 1
            elif low <= mid <= high and node.available:
                node.available = False
                for ancestor in path:
                    ancestor.free_on_left -= 1
                return mid
            elif mid < high:
                lo = mid + 1
            else:
                return None
        return None

    def checkout(self, room: int) -> bool:
        """Free ``room``; False if it was not occupied."""
        self._check_range(room, room)
        lo, hi = 0, len(self._nodes) - 1
        path: list[_Room] = []
        while (mid := self._mid(lo, hi)) != room:
            if room < mid:
                path.append(self._nodes[mid])
                hi = mid - 1
            else:
                lo = mid + 1
        node = self._nodes[room]
        if node.available:
            return False
        node.available = True
        for ancestor in path:
            ancestor.free_on_left += 1
        return True