"""Solutions to classic algorithm puzzles on lists, strings, stacks, bits and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "linked_list",
    "scanning",
    "searching",
    "sequences",
    "stacks",
    "strings",
    "tictactoe",
]