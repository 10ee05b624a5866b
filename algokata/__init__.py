"""Tested solutions to classic exercises on arrays, strings, numbers and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "strings"]