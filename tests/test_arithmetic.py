from hypothesis import given
from hypothesis import strategies as st

from linkwork.arithmetic import add_lists, add_one, binary_value, multiply_lists
from linkwork.chain import from_values, to_values

digits = st.lists(st.integers(0, 9), min_size=1, max_size=12)
bits = st.lists(st.integers(0, 1), min_size=1, max_size=30)


def _number(values):
    return int("".join(str(v) for v in values))


def test_add_one_carries_into_new_digit():
    assert to_values(add_one(from_values([9, 9, 9]))) == [1, 0, 0, 0]


def test_add_one_on_empty_list():
    assert to_values(add_one(None)) == [1]


@given(digits)
def test_add_one_increments_number(values):
    result = to_values(add_one(from_values(values)))
    assert _number(result) == _number(values) + 1
    assert all(0 <= d <= 9 for d in result)


@given(digits)
def test_add_one_agrees_with_adding_one_list(values):
    via_add = to_values(add_lists(from_values(values), from_values([1])))
    assert to_values(add_one(from_values(values))) == via_add


@given(digits, digits)
def test_add_lists_sums_numbers(a, b):
    result = to_values(add_lists(from_values(a), from_values(b)))
    assert _number(result) == _number(a) + _number(b)
    assert all(0 <= d <= 9 for d in result)


@given(digits, digits)
def test_add_lists_leaves_inputs_unchanged(a, b):
    first, second = from_values(a), from_values(b)
    add_lists(first, second)
    assert to_values(first) == a
    assert to_values(second) == b


@given(digits, digits)
def test_add_lists_is_commutative(a, b):
    left = to_values(add_lists(from_values(a), from_values(b)))
    right = to_values(add_lists(from_values(b), from_values(a)))
    assert left == right


def test_add_lists_with_empty_returns_other():
    other = from_values([3, 4])
    assert add_lists(None, other) is other
    assert add_lists(other, None) is other


@given(digits, digits)
def test_multiply_lists_gives_product(a, b):
    assert multiply_lists(from_values(a), from_values(b)) == _number(a) * _number(b)


@given(digits)
def test_multiply_by_empty_is_zero(a):
    assert multiply_lists(from_values(a), None) == multiply_lists(None, None)
    assert multiply_lists(None, from_values(a)) == 0


@given(bits)
def test_binary_value_reads_bits(values):
    assert binary_value(from_values(values)) == int("".join(map(str, values)), 2)


def test_binary_value_of_empty_list():
    assert binary_value(None) == 0