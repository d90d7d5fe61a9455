"""Algorithms and data structures for programming contests."""

__version__ = "0.1.0"

__all__ = [
    "annealing",
    "binary_search",
    "dijkstra",
    "fenwick",
    "formatting",
    "grid",
    "prime",
    "run_length",
    "topological_sort",
    "union_find",
]