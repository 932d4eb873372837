"""A singly linked list that grows at its head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass
class _Node:
    item: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Linked list; the given items keep their order, new ones go in front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for item in items:
            node = _Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def insert(self, value: Any) -> None:
        """Put ``value`` at the head of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def head(self) -> Any:
        """Return the first item; raises IndexError on an empty list."""
        if self._head is None:
            raise IndexError("head of an empty list")
        return self._head.item

    def tail(self) -> Any:
        """Return the last item; raises IndexError on an empty list."""
        if self._head is None:
            raise IndexError("tail of an empty list")
        node = self._head
        while node.next is not None:
            node = node.next
        return node.item