"""Classic algorithms and data structures: sequence puzzles, search trees, range queries, bin packing, room allotment and word dictionaries."""

__version__ = "0.1.0"