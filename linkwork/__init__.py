"""Singly linked list algorithms over a simple node type."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "chain",
    "compare",
    "deletion",
    "loops",
    "middle",
    "rearrange",
    "sorting",
]