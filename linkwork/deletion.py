"""Removing nodes from a list: by reference, by position, by pattern, by value."""

from __future__ import annotations

from collections import Counter

from .chain import Node, to_values


def delete_given_node(node: Node) -> int:
    """Delete ``node`` when only it is known, by taking over its successor.

    Returns the value that was removed. The last node has no successor to
    take over, so deleting it raises ValueError.
    """
    successor = node.next
    if successor is None:
        raise ValueError("the last node cannot be deleted through a reference to it")
    removed = node.data
    node.data = successor.data
    node.next = successor.next
    successor.next = None
    return removed


def delete_kth(head: Node | None, k: int) -> Node | None:
    """Delete the 1-based ``k``-th node recursively; return the new head.

    Raises ValueError for ``k`` below 1 and IndexError when the list has
    fewer than ``k`` nodes; the list is left unchanged in both cases.
    """
    if k < 1:
        raise ValueError(f"position must be at least 1, got {k}")
    if head is None:
        raise IndexError(f"position {k} is not present in the linked list")
    if k == 1:
        rest = head.next
        head.next = None
        return rest
    head.next = delete_kth(head.next, k - 1)
    return head


def delete_n_after_m(head: Node | None, m: int, n: int) -> Node | None:
    """Keep ``m`` nodes, delete the following ``n``, and repeat to the end.

    A ``m`` below 1 keeps one node each round. Returns the head, which
    never changes.
    """
    current = head
    while current is not None:
        for _ in range(m - 1):
            current = current.next
            if current is None:
                return head
        after = current.next
        for _ in range(n):
            if after is None:
                break
            after = after.next
        current.next = after
        current = after
    return head


def delete_alternate_iterative(head: Node | None) -> Node | None:
    """Delete the second, fourth, sixth... nodes in a loop; return the head."""
    prev = head
    while prev is not None and prev.next is not None:
        prev.next = prev.next.next
        prev = prev.next
    return head


def delete_alternate_recursive(head: Node | None) -> Node | None:
    """Delete the second, fourth, sixth... nodes recursively; return the head."""
    if head is None or head.next is None:
        return head
    head.next = head.next.next
    delete_alternate_recursive(head.next)
    return head


def remove_sorted_duplicates(head: Node | None) -> Node | None:
    """Drop each node equal to the one before it; return the head.

    On a sorted list this leaves every value once.
    """
    current = head
    while current is not None and current.next is not None:
        if current.data == current.next.data:
            current.next = current.next.next
        else:
            current = current.next
    return head


def first_non_repeating(head: Node | None) -> int | None:
    """Return the first value that occurs exactly once, or None if none does."""
    values = to_values(head)
    counts = Counter(values)
    return next((value for value in values if counts[value] == 1), None)