"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "linked_list",
    "maths",
    "queues",
    "recursion",
    "searching",
    "sliding_window",
    "sorting",
    "stacks",
    "strings",
]