"""Small algorithms over sequences and strings."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Hashable, Iterable, Sequence

PAREN_OPEN = "("
PAREN_CLOSE = ")"


@dataclass(frozen=True)
class Balance:
    """Outcome of a parenthesis balance check."""

    balanced: bool
    offending_position: int | None = None

    def __bool__(self) -> bool:
        return self.balanced


def find_missing(values: Iterable[int]) -> int:
    """Return the one number of 1..n+1 that is absent from ``values``."""
    items = list(values)
    n = len(items)
    return (n + 1) * (n + 2) // 2 - sum(items)


def check_balance(text: str) -> Balance:
    """Check that no closing parenthesis comes before its opening one.

    On failure the position of the first unmatched ``)`` is reported.
    """
    depth = 0
    for position, char in enumerate(text):
        if char == PAREN_OPEN:
            depth += 1
        elif char == PAREN_CLOSE:
            depth -= 1
        if depth < 0:
            return Balance(False, position)
    return Balance(True)


def longest_balanced(text: str) -> int:
    """Return the length of the longest balanced parenthesis subsequence."""
    score = 0
    open_count = 0
    for char in text:
        if char == PAREN_OPEN:
            open_count += 1
        elif char == PAREN_CLOSE and open_count > 0:
            score += 2
            open_count -= 1
    return score


def _letter_counts(text: str) -> Counter:
    lowered = text.lower()
    for char in lowered:
        if not "a" <= char <= "z":
            raise ValueError(f"not a latin letter: {char!r}")
    return Counter(lowered)


def is_anagram(first: str, second: str) -> bool:
    """Tell whether two words of latin letters are anagrams, ignoring case."""
    if len(first) != len(second):
        return False
    return _letter_counts(first) == _letter_counts(second)


def is_k_unique(values: Sequence[Hashable], k: int) -> bool:
    """Tell whether every window of ``k + 1`` consecutive values is distinct.

    Raises ValueError when ``k`` is negative or not smaller than the length.
    """
    items = list(values)
    if k < 0 or len(items) <= k:
        raise ValueError("invalid k")
    window: deque = deque()
    seen: set = set()
    for value in items:
        if len(window) > k:
            seen.discard(window.popleft())
        if value in seen:
            return False
        window.append(value)
        seen.add(value)
    return True