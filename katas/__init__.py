"""Solutions to classic programming exercises: words, sequences, numbers, data structures and concurrency."""

__version__ = "0.1.0"

__all__ = [
    "clock",
    "concurrency",
    "crypto",
    "linked_list",
    "numbers",
    "robots",
    "search_tree",
    "sequences",
    "tournament",
    "tree_building",
    "words",
]