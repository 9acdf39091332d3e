"""Solutions to classic array, string, arithmetic, linked-list and tree problems."""

__version__ = "0.1.0"
__all__ = ["arith", "arrays", "linked_lists", "strings", "trees"]