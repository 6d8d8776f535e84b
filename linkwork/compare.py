"""Comparing lists with each other and with themselves."""

from __future__ import annotations

from .chain import Node, to_values


def compare_lists(a: Node | None, b: Node | None) -> int:
    """Compare two lists lexicographically; return -1, 0 or 1."""
    while a is not None and b is not None and a.data == b.data:
        a = a.next
        b = b.next
    if a is not None and b is not None:
        return 1 if a.data > b.data else -1
    if a is not None:
        return 1
    if b is not None:
        return -1
    return 0


def identical_iterative(a: Node | None, b: Node | None) -> bool:
    """Tell whether two lists hold the same values in the same order."""
    while a is not None and b is not None:
        if a.data != b.data:
            return False
        a = a.next
        b = b.next
    return a is None and b is None


def identical_recursive(a: Node | None, b: Node | None) -> bool:
    """Tell recursively whether two lists hold the same values in order."""
    if a is None and b is None:
        return True
    if a is not None and b is not None:
        return a.data == b.data and identical_recursive(a.next, b.next)
    return False


def is_palindrome(head: Node | None) -> bool:
    """Tell whether the list reads the same both ways."""
    values = to_values(head)
    return values == values[::-1]