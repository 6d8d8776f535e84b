"""Finding, moving and deleting the middle and other positional nodes."""

from __future__ import annotations

from .chain import Node, iter_nodes, length_iterative


def _require_nodes(head: Node | None) -> Node:
    if head is None:
        raise ValueError("linked list is empty")
    return head


def middle_by_count(head: Node | None) -> int:
    """Return the middle value by counting the nodes first.

    With an even length the second of the two middle nodes is chosen.
    """
    node = _require_nodes(head)
    for _ in range(length_iterative(head) // 2):
        node = node.next
    return node.data


def middle_by_pointers(head: Node | None) -> int:
    """Return the middle value with a slow and a fast pointer."""
    slow = fast = _require_nodes(head)
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow.data


def middle_by_parity(head: Node | None) -> int:
    """Return the middle value, advancing on every odd count."""
    middle = _require_nodes(head)
    for position, _ in enumerate(iter_nodes(head)):
        if position % 2 != 0:
            middle = middle.next
    return middle.data


def middle_to_front(head: Node | None) -> Node | None:
    """Move the middle node to the head; return the new head.

    Lists with fewer than two nodes are returned unchanged.
    """
    if head is None or head.next is None:
        return head
    prev = None
    slow = fast = head
    while fast is not None and fast.next is not None:
        prev, slow, fast = slow, slow.next, fast.next.next
    prev.next = slow.next
    slow.next = head
    return slow


def delete_middle(head: Node | None) -> tuple[Node | None, int]:
    """Unlink the middle node; return the new head and the deleted value.

    Raises ValueError for an empty list.
    """
    node = _require_nodes(head)
    if node.next is None:
        return None, node.data
    prev = None
    slow = fast = node
    while fast is not None and fast.next is not None:
        prev, slow, fast = slow, slow.next, fast.next.next
    prev.next = slow.next
    slow.next = None
    return head, slow.data


def modular_node(head: Node | None, k: int) -> int | None:
    """Return the value of the last node whose 1-based position divides by k.

    Raises ValueError for an empty list or a non-positive k; returns None
    when the list is shorter than k.
    """
    if head is None or k <= 0:
        raise ValueError("need a non-empty list and a positive k")
    found = None
    for position, node in enumerate(iter_nodes(head), start=1):
        if position % k == 0:
            found = node.data
    return found


def count_rotations(head: Node | None) -> int:
    """Count the nodes before the first value smaller than the head's."""
    first = _require_nodes(head)
    count = 0
    for node in iter_nodes(first):
        if node.data < first.data:
            break
        count += 1
    return count