"""Best-fit and worst-fit bin packing with bins of capacity 1000."""

from __future__ import annotations

import argparse
import bisect
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

CAPACITY = 1000


def _checked(weight: int) -> int:
    if weight < 0 or CAPACITY < weight:
        raise ValueError("invalid weight")
    return weight


def best_fit(weights: Iterable[int]) -> int:
    """Pack each weight into the tightest bin it fits; return the bin count."""
    spaces: list[int] = []
    for weight in map(_checked, weights):
        index = bisect.bisect_left(spaces, weight)
        if index == len(spaces):
            bisect.insort(spaces, CAPACITY - weight)
        else:
            space = spaces.pop(index)
            bisect.insort(spaces, space - weight)
    return len(spaces)


def worst_fit(weights: Iterable[int]) -> int:
    """Pack each weight into the roomiest bin; return the bin count."""
    spaces: list[int] = []
    for weight in map(_checked, weights):
        if not spaces or spaces[-1] < weight:
            bisect.insort(spaces, CAPACITY - weight)
        else:
            space = spaces.pop()
            bisect.insort(spaces, space - weight)
    return len(spaces)


@dataclass(frozen=True)
class Comparison:
    """Tally of which strategy used fewer bins over many trials."""

    best_fit_wins: int
    worst_fit_wins: int
    even: int

    @property
    def trials(self) -> int:
        return self.best_fit_wins + self.worst_fit_wins + self.even

    def __str__(self) -> str:
        return (
            f"best_fit_wins: {self.best_fit_wins} "
            f"worst_fit_wins: {self.worst_fit_wins} even: {self.even}"
        )


def compare(
    trials: int = 10000, items: int = 100, rng: random.Random | None = None
) -> Comparison:
    """Run both strategies on random weights and count the wins."""
    rng = rng or random.Random()
    best_wins = worst_wins = even = 0
    for _ in range(trials):
        weights = [rng.randint(1, CAPACITY) for _ in range(items)]
        best = best_fit(weights)
        worst = worst_fit(weights)
        if best < worst:
            best_wins += 1
        elif best == worst:
            even += 1
        else:
            worst_wins += 1
    return Comparison(best_wins, worst_wins, even)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare best-fit and worst-fit bin packing."
    )
    parser.add_argument("--trials", type=int, default=10000)
    parser.add_argument("--items", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    result = compare(args.trials, args.items, random.Random(args.seed))
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())