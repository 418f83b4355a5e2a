"""Character, memory, string, output, line-reading and linked-list helpers."""

__version__ = "1.0.0"
__all__ = ["chars", "memory", "strings", "text", "output", "lines", "linked_list"]