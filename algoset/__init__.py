"""Classic algorithm routines on integers, strings, arrays, linked lists and grids."""

__version__ = "0.1.0"

__all__ = ["arrays", "combinatorics", "grid", "integers", "linked_list", "strings"]