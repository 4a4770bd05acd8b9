"""Data structure and algorithm exercises: collections, linked lists, stacks,
expression handling, include expansion and timing helpers."""

__version__ = "0.0.1"

__all__ = [
    "algorithms",
    "benchmarks",
    "collection",
    "expressions",
    "include",
    "linked_list",
    "measure",
    "permutation",
    "sorted_lists",
    "stacks",
]