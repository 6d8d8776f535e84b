"""Singly linked list nodes and the basic walks over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list; nodes compare by identity."""

    data: int
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_values(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes from ``head`` onwards (endless on a looped list)."""
    while head is not None:
        yield head
        head = head.next


def to_values(head: Node | None) -> list[int]:
    """Return the values of the list as a Python list."""
    return [node.data for node in iter_nodes(head)]


def format_values(head: Node | None) -> str:
    """Return the values separated by single spaces."""
    return " ".join(str(value) for value in to_values(head))


def length_iterative(head: Node | None) -> int:
    """Count the nodes by walking the list."""
    return sum(1 for _ in iter_nodes(head))


def length_recursive(head: Node | None) -> int:
    """Count the nodes recursively."""
    if head is None:
        return 0
    return 1 + length_recursive(head.next)


def node_value(head: Node | None, index: int) -> int:
    """Return the value at zero-based ``index``.

    A negative index does not advance and yields the head's value.
    Raises IndexError when the list has no such node.
    """
    for position, node in enumerate(iter_nodes(head)):
        if position >= index:
            return node.data
    raise IndexError(f"index {index} is not present in the linked list")


def search_iterative(head: Node | None, key: int) -> bool:
    """Tell whether ``key`` is in the list, walking it."""
    return any(node.data == key for node in iter_nodes(head))


def search_recursive(head: Node | None, key: int) -> bool:
    """Tell whether ``key`` is in the list, recursively."""
    if head is None:
        return False
    if head.data == key:
        return True
    return search_recursive(head.next, key)


def reverse_iterative(head: Node | None) -> Node | None:
    """Reverse the list in place by relinking; return the new head."""
    prev: Node | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def reverse_recursive(head: Node | None) -> Iterator[int]:
    """Yield the values from last to first without changing the list."""
    if head is None:
        return
    yield from reverse_recursive(head.next)
    yield head.data


def alternate_values_iterative(head: Node | None) -> list[int]:
    """Return the values of the first, third, fifth... nodes."""
    return [
        node.data
        for position, node in enumerate(iter_nodes(head))
        if position % 2 == 0
    ]


def alternate_values_recursive(head: Node | None, index: int = 0) -> list[int]:
    """Return the values whose position, counted from ``index``, is even."""
    if head is None:
        return []
    rest = alternate_values_recursive(head.next, index + 1)
    if index % 2 == 0:
        return [head.data, *rest]
    return rest


def delete_iterative(head: Node | None) -> int:
    """Unlink every node; return how many were deleted.

    Raises ValueError for an empty list.
    """
    if head is None:
        raise ValueError("linked list is empty")
    deleted = 0
    while head is not None:
        head.next, head = None, head.next
        deleted += 1
    return deleted


def delete_recursive(head: Node | None) -> int:
    """Unlink every node from the tail back; return how many were deleted."""
    if head is None:
        return 0
    deleted = delete_recursive(head.next)
    head.next = None
    return deleted + 1