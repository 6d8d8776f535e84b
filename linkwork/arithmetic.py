"""Numbers held as lists of digits or bits."""

from __future__ import annotations

from itertools import zip_longest

from .chain import Node, from_values, iter_nodes, reverse_iterative, to_values


def add_one(head: Node | None) -> Node:
    """Add one to the number whose decimal digits the list holds.

    The list is changed in place; the returned head may be a new node
    when the carry adds a digit. An empty list counts as zero.
    """
    if head is None:
        return Node(1)
    head = reverse_iterative(head)
    carry = 1
    last = head
    for node in iter_nodes(head):
        total = node.data + carry
        carry = 1 if total >= 10 else 0
        node.data = total % 10
        last = node
    if carry > 0:
        last.next = Node(carry)
    return reverse_iterative(head)


def add_lists(first: Node | None, second: Node | None) -> Node | None:
    """Return a new list holding the digit-wise sum of two numbers.

    When one list is empty the other is returned as it is.
    """
    if first is None:
        return second
    if second is None:
        return first
    digits = []
    carry = 0
    for a, b in zip_longest(
        reversed(to_values(first)), reversed(to_values(second)), fillvalue=0
    ):
        total = carry + a + b
        carry = 1 if total >= 10 else 0
        digits.append(total % 10)
    if carry > 0:
        digits.append(carry)
    return from_values(reversed(digits))


def _decimal(head: Node | None) -> int:
    number = 0
    for node in iter_nodes(head):
        number = number * 10 + node.data
    return number


def multiply_lists(first: Node | None, second: Node | None) -> int:
    """Return the product of the two numbers the digit lists hold."""
    return _decimal(first) * _decimal(second)


def binary_value(head: Node | None) -> int:
    """Return the value of the list read as binary digits, most significant first."""
    value = 0
    for node in iter_nodes(head):
        value = value * 2 + node.data
    return value