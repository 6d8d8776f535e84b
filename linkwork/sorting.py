"""Sorting, merging and flattening linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .chain import Node, iter_nodes, to_values


def sort_012_counting(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by counting and rewriting the values.

    The nodes stay where they are; only their values change. Raises
    ValueError when a value other than 0, 1 or 2 is present.
    """
    values = to_values(head)
    for value in values:
        if value not in (0, 1, 2):
            raise ValueError(f"value {value} is not 0, 1 or 2")
    for node, value in zip(iter_nodes(head), sorted(values)):
        node.data = value
    return head


def sort_012_links(head: Node | None) -> Node | None:
    """Sort a list of 0s, 1s and 2s by relinking its nodes.

    Nodes holding 0 come first, then those holding 1, then all others,
    each group in its original order. Returns the new head.
    """
    zeros: list[Node] = []
    ones: list[Node] = []
    rest: list[Node] = []
    for node in iter_nodes(head):
        if node.data == 0:
            zeros.append(node)
        elif node.data == 1:
            ones.append(node)
        else:
            rest.append(node)
    ordered = zeros + ones + rest
    if not ordered:
        return None
    for node, following in zip(ordered, ordered[1:]):
        node.next = following
    ordered[-1].next = None
    return ordered[0]


def sort_absolute_sorted(head: Node | None) -> Node | None:
    """Sort by actual value a list that is sorted by absolute value.

    Each node smaller than its predecessor is moved to the front.
    Returns the new head.
    """
    if head is None:
        return None
    prev = head
    current = head.next
    while current is not None:
        if current.data < prev.data:
            prev.next = current.next
            current.next = head
            head = current
        else:
            prev = current
        current = prev.next
    return head


def merge_sorted(first: Node | None, second: Node | None) -> Node | None:
    """Merge two sorted lists by relinking; return the merged head.

    On equal values the node from ``second`` comes first.
    """
    if first is None:
        return second
    if second is None:
        return first
    anchor = Node(0)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


@dataclass(eq=False, repr=False)
class FlatNode:
    """A node with a link to the next column (right) and down its own column."""

    data: int
    right: FlatNode | None = None
    down: FlatNode | None = None

    def __repr__(self) -> str:
        return f"FlatNode({self.data!r})"

    def push(self, data: int) -> FlatNode:
        """Return a new node holding ``data`` on top of this column."""
        return FlatNode(data, None, self)


def _merge_down(a: FlatNode | None, b: FlatNode | None) -> FlatNode | None:
    if a is None:
        return b
    if b is None:
        return a
    anchor = FlatNode(0)
    tail = anchor
    while a is not None and b is not None:
        if a.data < b.data:
            taken, a = a, a.down
        else:
            taken, b = b, b.down
        taken.right = None
        tail.down = taken
        tail = taken
    tail.down = a if a is not None else b
    return anchor.down


def flatten(root: FlatNode | None) -> FlatNode | None:
    """Merge sorted columns joined by ``right`` links into one sorted column."""
    if root is None or root.right is None:
        return root
    return _merge_down(root, flatten(root.right))


def _iter_down(head: FlatNode | None) -> Iterator[FlatNode]:
    while head is not None:
        yield head
        head = head.down


def flat_values(head: FlatNode | None) -> list[int]:
    """Return the values found by following ``down`` links from ``head``."""
    return [node.data for node in _iter_down(head)]