# algokit

A collection of small, self-contained algorithms and data structures:
sequence puzzles, binary search trees and their repair, height balancing,
range-minimum and prefix-sum structures, bin-packing heuristics, hotel room
allotment, a constant-time sparse set, a linked list, a chained hash table,
a red-black tree, and a word-collecting benchmark built on them.
The package depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sequences` | `find_missing`, `check_balance` (returns a `Balance`), `longest_balanced`, `is_anagram`, `is_k_unique` |
| `algokit.binpacking` | `best_fit`, `worst_fit`, `compare` (returns a `Comparison`), `main` |
| `algokit.range_min` | `PrefixMinTable` (O(1) queries), `MinSegmentTree` (O(log n) queries) |
| `algokit.partial_sums` | `PartialSums` with `add` and `prefix_sum` |
| `algokit.bst` | `BinarySearchTree`, `Node`, `merge_sorted`, `merge_by_insertion` |
| `algokit.balance` | `build_height_balanced`, `is_height_balanced` |
| `algokit.repair` | `labels_are_sane`, `find_swapped_by_bounds`, `repair_by_bounds` |
| `algokit.prefix` | `items_with_prefix`, `write_prefixed` |
| `algokit.hotel` | `SegmentTreeAllotter`, `RankTreeAllotter` |
| `algokit.sparse_set` | `SparseSet` |
| `algokit.linked_list` | `SinglyLinkedList` |
| `algokit.hash_table` | `HashTable` |
| `algokit.red_black` | `RedBlackTree`, `Color` |
| `algokit.wordcount` | `WordStore` and its `ListStore`, `TreeStore`, `RedBlackStore`, `HashStore`; `count_words`, `timed`, `main` |

Some behaviour worth knowing:

- `check_balance` returns a `Balance` that is truthy when balanced and
  otherwise carries the position of the first unmatched `)`.
- `is_anagram` accepts latin letters only (case is ignored) and raises
  `ValueError` on anything else; `is_k_unique` raises `ValueError` when `k`
  is negative or not smaller than the number of values.
- `best_fit` and `worst_fit` use bins of capacity 1000 and raise
  `ValueError` for a weight outside 0..1000.
- `BinarySearchTree` keeps duplicates in the right subtree; `find_swapped`
  and `repair_swapped` fix a tree in which two items were exchanged, and
  `algokit.repair` does the same by tracking value bounds.
- The hotel allotters return the room they assigned from `checkin`, or
  `None` when no room in the range is free; `checkout` returns `False` for a
  room that was not occupied. Out-of-range rooms raise `ValueError`.
- `SparseSet(universe, capacity)` holds integers from 1 to `universe`;
  `add` returns `False` when the value is present or the set is full.

## Examples

```python
from algokit.sequences import find_missing, longest_balanced, is_anagram
from algokit.binpacking import best_fit, worst_fit
from algokit.bst import BinarySearchTree, merge_sorted
from algokit.hotel import SegmentTreeAllotter

find_missing([1, 2, 4, 5, 6])          # 3
longest_balanced("((())())()")         # 10
is_anagram("silent", "listen")         # True

best_fit([300, 400, 300, 400])         # 2 bins
worst_fit([501, 501, 501, 501, 249, 250, 249, 250, 249, 250, 249, 250])  # 5 bins

tree = BinarySearchTree([3, 2, 4, 1, 5])
tree.max_depth()                       # 2
list(tree)                             # [1, 2, 3, 4, 5]

merge_sorted(BinarySearchTree([10]), BinarySearchTree([20]))  # [10, 20]

hotel = SegmentTreeAllotter(5)
hotel.checkin(0, 2)                    # 0, the lowest free room in [0, 2]
hotel.count(0, 4)                      # 4 rooms still free
hotel.checkout(0)                      # True
```

## Commands

`algokit-binpacking` packs random batches of weights (each from 1 to 1000)
with both the best-fit and the worst-fit heuristic and prints how often each
one needed fewer bins, and how often they tied. Options: `--trials`
(default 10000), `--items` per batch (default 100) and `--seed`.

```
algokit-binpacking --trials 1000 --seed 1
```

`algokit-wordcount` reads a text file (by default `some-text.txt` in the
current directory), stores its distinct words in a linked list, a binary
search tree, a red-black tree and a hash table in turn, writes each store's
words one per line to its own `<name>.txt` file, and records how many
milliseconds each store took in `result-time.txt`. `--output-dir` chooses
where these files go. It exits with status 1 if the input cannot be read or
the timing file cannot be written.

```
algokit-wordcount some-text.txt --output-dir results
```