"""Reordering nodes: grouping, moving, swapping, rotating and splicing."""

from __future__ import annotations

from .chain import Node


def arrange_even_odd(head: Node | None) -> Node | None:
    """Relink so nodes at odd positions come first, then those at even ones.

    Positions count from 1 and relative order is kept. Returns the head.
    """
    if head is None:
        return None
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def move_last_to_front(head: Node | None) -> Node | None:
    """Move the last node to the front; return the new head."""
    if head is None or head.next is None:
        return head
    before_last = head
    while before_last.next.next is not None:
        before_last = before_last.next
    last = before_last.next
    before_last.next = None
    last.next = head
    return last


def pairwise_swap_iterative(head: Node | None) -> Node | None:
    """Swap the values of each pair of neighbours in a loop; return the head."""
    node = head
    while node is not None and node.next is not None:
        node.data, node.next.data = node.next.data, node.data
        node = node.next.next
    return head


def pairwise_swap_recursive(head: Node | None) -> Node | None:
    """Swap the values of each pair of neighbours recursively; return the head."""
    if head is None or head.next is None:
        return head
    head.data, head.next.data = head.next.data, head.data
    pairwise_swap_recursive(head.next.next)
    return head


def rotate(head: Node | None, k: int) -> Node | None:
    """Rotate left so the node after the ``k``-th becomes the head.

    A ``k`` below 1 rotates by one; ``k`` equal to the length leaves the
    order unchanged. Raises IndexError when the list is shorter than ``k``.
    """
    if head is None:
        return None
    kth = head
    for _ in range(k - 1):
        kth = kth.next
        if kth is None:
            raise IndexError(f"cannot rotate by {k}: the list is shorter")
    tail = kth
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    new_head = kth.next
    kth.next = None
    return new_head


def swap_keys(head: Node | None, x: int, y: int) -> Node | None:
    """Swap the first nodes holding ``x`` and ``y`` by relinking.

    Returns the new head. Raises ValueError when either key is missing.
    """
    if x == y:
        return head
    prev_x, current_x = None, head
    while current_x is not None and current_x.data != x:
        prev_x, current_x = current_x, current_x.next
    prev_y, current_y = None, head
    while current_y is not None and current_y.data != y:
        prev_y, current_y = current_y, current_y.next
    if current_x is None or current_y is None:
        raise ValueError("one or both of the given keys are not in the list")
    if prev_x is not None:
        prev_x.next = current_y
    else:
        head = current_y
    if prev_y is not None:
        prev_y.next = current_x
    else:
        head = current_x
    current_x.next, current_y.next = current_y.next, current_x.next
    return head


def insert_list_at(first: Node | None, second: Node | None, k: int) -> Node:
    """Splice ``second`` into ``first`` after its 1-based ``k``-th node.

    A ``k`` below 1 splices after the head. Raises ValueError when
    ``first`` is empty and IndexError when it has fewer than ``k`` nodes.
    Returns the head of ``first``.
    """
    if first is None:
        raise ValueError("linked list is empty")
    anchor = first
    for _ in range(k - 1):
        anchor = anchor.next
        if anchor is None:
            raise IndexError(f"position {k} is not present in the linked list")
    if second is None:
        return first
    tail = second
    while tail.next is not None:
        tail = tail.next
    tail.next = anchor.next
    anchor.next = second
    return first