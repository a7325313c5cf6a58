"""Classic array, string, search, matrix and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "matrix", "numbers", "searching", "strings", "sums"]