import pytest
from hypothesis import given
from hypothesis import strategies as st

from linkwork.chain import (
    Node,
    alternate_values_iterative,
    alternate_values_recursive,
    delete_iterative,
    delete_recursive,
    format_values,
    from_values,
    iter_nodes,
    length_iterative,
    length_recursive,
    node_value,
    reverse_iterative,
    reverse_recursive,
    search_iterative,
    search_recursive,
    to_values,
)

int_lists = st.lists(st.integers(-1000, 1000), max_size=60)


@given(int_lists)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_builds_nothing():
    assert from_values([]) is None
    assert to_values(None) == []


def test_nodes_link_in_order():
    head = from_values([4, 5])
    assert head.data == 4
    assert head.next.data == 5
    assert head.next.next is None


def test_format_values():
    assert format_values(from_values([1, 2, 3])) == "1 2 3"
    assert format_values(None) == ""


def test_iter_nodes_yields_nodes():
    head = from_values([7, 8, 9])
    nodes = list(iter_nodes(head))
    assert nodes[0] is head
    assert [node.data for node in nodes] == [7, 8, 9]


@given(int_lists)
def test_lengths_agree(values):
    head = from_values(values)
    assert length_iterative(head) == len(values)
    assert length_recursive(head) == len(values)


@given(st.lists(st.integers(), min_size=1, max_size=40), st.data())
def test_node_value_at_index(values, data):
    index = data.draw(st.integers(0, len(values) - 1))
    assert node_value(from_values(values), index) == values[index]


def test_node_value_out_of_range():
    with pytest.raises(IndexError):
        node_value(from_values([1, 2, 3]), 3)
    with pytest.raises(IndexError):
        node_value(None, 0)


def test_node_value_negative_index_gives_head():
    assert node_value(from_values([5, 6]), -2) == 5


@given(int_lists, st.integers(-1000, 1000))
def test_search_both_ways(values, key):
    head = from_values(values)
    assert search_iterative(head, key) == (key in values)
    assert search_recursive(head, key) == (key in values)


@given(int_lists)
def test_reverse_iterative(values):
    head = from_values(values)
    last = list(iter_nodes(head))[-1] if values else None
    reversed_head = reverse_iterative(head)
    assert reversed_head is last
    assert to_values(reversed_head) == values[::-1]
    assert to_values(reverse_iterative(reversed_head)) == values


@given(int_lists)
def test_reverse_recursive_leaves_list(values):
    head = from_values(values)
    assert list(reverse_recursive(head)) == values[::-1]
    assert to_values(head) == values


@given(int_lists)
def test_alternate_values(values):
    head = from_values(values)
    assert alternate_values_iterative(head) == values[::2]
    assert alternate_values_recursive(head) == values[::2]
    assert alternate_values_recursive(head, 1) == values[1::2]


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_delete_iterative_unlinks(values):
    head = from_values(values)
    nodes = list(iter_nodes(head))
    assert delete_iterative(head) == len(values)
    assert all(node.next is None for node in nodes)


def test_delete_iterative_empty():
    with pytest.raises(ValueError):
        delete_iterative(None)


@given(int_lists)
def test_delete_recursive_unlinks(values):
    head = from_values(values)
    nodes = list(iter_nodes(head))
    assert delete_recursive(head) == len(values)
    assert all(node.next is None for node in nodes)


def test_node_repr_is_short_on_loops():
    node = Node(3)
    node.next = node
    assert repr(node) == "Node(3)"