# linkwork

A collection of classic singly linked list algorithms. Each one is a small
function over a plain `Node` type (`data` and `next`). The package is useful
for study, for interview practice, or as a reference for one of these
routines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building and inspecting lists

```python
from linkwork.chain import from_values, to_values, format_values

head = from_values([1, 2, 3, 4, 5])
to_values(head)       # [1, 2, 3, 4, 5]
format_values(head)   # "1 2 3 4 5"
```

Nodes compare by identity, so two lists that hold the same values are still
different objects. Functions that change the shape of a list return its new
head. Missing positions, empty lists and keys that are not present raise
`IndexError` or `ValueError`, as each function's docstring says.

## What is included

- `linkwork.chain`: the `Node` type, `from_values`, `iter_nodes`,
  `to_values` and `format_values`. It also has length (`length_iterative`,
  `length_recursive`), the value at an index (`node_value`) and search
  (`search_iterative`, `search_recursive`). There is in-place reversal
  (`reverse_iterative`) and a generator of the values from last to first
  (`reverse_recursive`). Alternate values come from
  `alternate_values_iterative` and `alternate_values_recursive`. Unlinking
  every node is done by `delete_iterative` or `delete_recursive`.
- `linkwork.middle`: three ways of finding the middle value
  (`middle_by_count`, `middle_by_pointers`, `middle_by_parity`). For an
  even length they pick the second of the two middle nodes. It also has
  `middle_to_front` and `delete_middle`, which returns the new head and
  the deleted value. `modular_node` gives the last node whose position
  divides by k. `count_rotations` counts the nodes before the first value
  smaller than the head's.
- `linkwork.loops`: `is_circular`, `has_loop`, `remove_loop`,
  `loop_length` and `make_loop_at`. It also has `circular_values`, which
  goes once round a circular list, and `insert_sorted_circular`.
- `linkwork.arithmetic`: numbers held one decimal digit per node, most
  significant first. `add_one` adds one to such a number. `add_lists`
  adds two of them and `multiply_lists` multiplies them. `binary_value`
  reads a list of bits.
- `linkwork.compare`: `compare_lists` compares two lists lexicographically
  and returns -1, 0 or 1. It also has `identical_iterative`,
  `identical_recursive` and `is_palindrome`.
- `linkwork.deletion`: `delete_given_node` deletes a node when only a
  reference to it is known. `delete_kth` deletes the k-th node, counting
  from 1. `delete_n_after_m` keeps m nodes, then deletes n, and repeats.
  `delete_alternate_iterative` and `delete_alternate_recursive` delete
  every second node. `remove_sorted_duplicates` and `first_non_repeating`
  complete the module.
- `linkwork.rearrange`: `arrange_even_odd` puts the nodes at odd positions
  before those at even positions. It also has `move_last_to_front`,
  `pairwise_swap_iterative`, `pairwise_swap_recursive` and `rotate`.
  `swap_keys` relinks the nodes that hold two keys. `insert_list_at`
  splices one list into another after its k-th node.
- `linkwork.sorting`: `sort_012_counting` sorts a list of 0s, 1s and 2s by
  rewriting the values. `sort_012_links` sorts one by relinking the nodes.
  `sort_absolute_sorted` sorts by actual value a list that is already
  sorted by absolute value. `merge_sorted` merges two sorted lists. For
  flattening it has `FlatNode`, which has `right` and `down` links, and a
  `push` method that returns a new node on top of a column. `flatten`
  merges the sorted columns into one, and `flat_values` reads the
  flattened column.

## Example

```python
from linkwork.chain import from_values, to_values
from linkwork.arithmetic import add_lists
from linkwork.rearrange import rotate
from linkwork.sorting import FlatNode, flatten, flat_values

total = add_lists(from_values([9, 9]), from_values([1]))
to_values(total)    # [1, 0, 0]

to_values(rotate(from_values([1, 2, 3, 4, 5]), 2))   # [3, 4, 5, 1, 2]

first = FlatNode(30).push(25).push(20)
first.right = FlatNode(28).push(23)
flat_values(flatten(first))   # [20, 23, 25, 28, 30]
```

## What it does not do

This is a library of functions only. It has no command-line program and no
interactive prompts. Build lists from Python values with `from_values` and
read the results with `to_values` or `format_values`.