"""Loops and circular lists: detection, measurement, removal and insertion."""

from __future__ import annotations

from .chain import Node


def _meeting_point(head: Node | None) -> Node | None:
    """Return the node where a slow and a fast pointer meet, if they do."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def is_circular(head: Node | None) -> bool:
    """Tell whether following ``next`` from ``head`` leads back to ``head``.

    An empty list counts as circular. A list whose loop does not pass
    through ``head`` is not circular.
    """
    if head is None:
        return True
    seen: set[Node] = set()
    node = head.next
    while node is not None and node is not head:
        if node in seen:
            return False
        seen.add(node)
        node = node.next
    return node is head


def has_loop(head: Node | None) -> bool:
    """Tell whether the list contains a loop."""
    return _meeting_point(head) is not None


def remove_loop(head: Node | None) -> bool:
    """Break the loop in the list, if any; return whether one was removed."""
    meet = _meeting_point(head)
    if meet is None:
        return False
    slow, fast = head, meet
    if slow is fast:
        # The loop starts at the head: cut the link that returns to it.
        while fast.next is not head:
            fast = fast.next
    else:
        while slow.next is not fast.next:
            slow = slow.next
            fast = fast.next
    fast.next = None
    return True


def loop_length(head: Node | None) -> int:
    """Return the number of nodes in the loop, or 0 when there is none."""
    meet = _meeting_point(head)
    if meet is None:
        return 0
    count = 1
    node = meet
    while node.next is not meet:
        count += 1
        node = node.next
    return count


def make_loop_at(head: Node | None, k: int) -> Node:
    """Link the tail back to the 1-based ``k``-th node; return that node.

    A ``k`` below 1 links the tail to the head. Raises ValueError for an
    empty list and IndexError when the list has fewer than ``k`` nodes.
    """
    if head is None:
        raise ValueError("linked list is empty")
    target = head
    for _ in range(k - 1):
        target = target.next
        if target is None:
            raise IndexError(f"position {k} is not present in the linked list")
    tail = target
    while tail.next is not None:
        tail = tail.next
    tail.next = target
    return target


def circular_values(head: Node | None) -> list[int]:
    """Return the values of a circular list, once round from ``head``.

    Raises ValueError when the list ends instead of coming back to ``head``.
    """
    if head is None:
        return []
    values = [head.data]
    node = head.next
    while node is not head:
        if node is None:
            raise ValueError("linked list is not circular")
        values.append(node.data)
        node = node.next
    return values


def insert_sorted_circular(head: Node | None, value: int) -> Node:
    """Insert ``value`` into a sorted circular list; return the new head."""
    node = Node(value)
    if head is None:
        node.next = node
        return node
    if value <= head.data:
        last = head
        while last.next is not head:
            last = last.next
        last.next = node
        node.next = head
        return node
    current = head
    while current.next is not head and value >= current.next.data:
        current = current.next
    node.next = current.next
    current.next = node
    return head