import math

import pytest

from dsakit.linked_list import (
    ListNode,
    add_two_numbers,
    build_list,
    delete_duplicates,
    delete_middle,
    delete_node,
    has_cycle,
    insert_greatest_common_divisors,
    is_palindrome_list,
    merge_two_lists,
    middle_node,
    odd_even_list,
    partition,
    print_list,
    remove_elements,
    remove_nth_from_end,
    reverse_list,
    rotate_right,
    swap_nodes,
    to_values,
)

SAMPLES = [[], [7], [1, 2], [1, 2, 3], [5, 1, 4, 2, 8, 3], [9, 9, 1, 0, 4, 6, 2]]


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", SAMPLES)
def test_build_and_to_values_round_trip(values):
    assert to_values(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None


def test_iteration_of_node():
    head = build_list([4, 5, 6])
    assert list(head) == [4, 5, 6]
    assert list(head.next) == [5, 6]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list(values):
    assert to_values(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_twice_is_identity(values):
    assert to_values(reverse_list(reverse_list(build_list(values)))) == values


@pytest.mark.parametrize("values", [v for v in SAMPLES if len(v) >= 2])
def test_delete_middle(values):
    mid = len(values) // 2
    assert to_values(delete_middle(build_list(values))) == values[:mid] + values[mid + 1:]


def test_delete_middle_of_single_node_is_empty():
    assert delete_middle(build_list([1])) is None
    assert delete_middle(None) is None


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_remove_nth_from_end_every_position(values):
    for n in range(1, len(values) + 1):
        idx = len(values) - n
        result = to_values(remove_nth_from_end(build_list(values), n))
        assert result == values[:idx] + values[idx + 1:]


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


def test_insert_gcd_worked_example():
    head = insert_greatest_common_divisors(build_list([18, 6, 10, 3]))
    assert to_values(head) == [18, 6, 6, 2, 10, 1, 3]


@pytest.mark.parametrize("values", [v for v in SAMPLES if v and 0 not in v])
def test_insert_gcd_structure(values):
    result = to_values(insert_greatest_common_divisors(build_list(values)))
    assert len(result) == 2 * len(values) - 1
    assert result[0::2] == values
    for left, inserted, right in zip(result[0::2], result[1::2], result[2::2]):
        assert left % inserted == 0 and right % inserted == 0
        assert inserted == math.gcd(left, right)


@pytest.mark.parametrize(
    "values",
    [[], [1], [1, 1], [1, 2, 3, 3, 4, 4, 5], [1, 1, 1, 2, 3], [2, 2, 3, 3], [1, 2, 2]],
)
def test_delete_duplicates(values):
    expected = [v for v in values if values.count(v) == 1]
    assert to_values(delete_duplicates(build_list(values))) == expected


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("x", [0, 3, 5, 100])
def test_partition_is_stable(values, x):
    head = build_list(values)
    original_nodes = set(map(id, _nodes(head)))
    result = partition(head, x)
    expected = [v for v in values if v < x] + [v for v in values if v >= x]
    assert to_values(result) == expected
    assert set(map(id, _nodes(result))) == original_nodes


def test_add_two_numbers_worked_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b", [([0], [0]), ([9, 9, 9, 9], [9, 9]), ([1], [9, 9, 9]), ([3, 4], [])]
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = to_values(add_two_numbers(build_list(a), build_list(b)))
    assert _digits_to_int(result) == _digits_to_int(a) + _digits_to_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_delete_node_removes_value():
    values = [4, 5, 1, 9]
    head = build_list(values)
    delete_node(head.next)
    assert to_values(head) == [4, 1, 9]


def test_delete_node_tail_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("values", SAMPLES)
def test_middle_node(values):
    assert to_values(middle_node(build_list(values))) == values[len(values) // 2:]


@pytest.mark.parametrize(
    "a, b", [([], []), ([1, 2, 4], [1, 3, 4]), ([], [0]), ([5, 6], [1, 2, 3])]
)
def test_merge_two_lists_sorted(a, b):
    merged = merge_two_lists(build_list(a), build_list(b))
    assert to_values(merged) == sorted(a + b)


def test_merge_prefers_first_list_on_ties():
    first = build_list([1])
    second = build_list([1])
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


def test_print_list(capsys):
    print_list(build_list([1, 2, 3]))
    assert capsys.readouterr().out == "1 2 3 \n"


def test_print_empty_list(capsys):
    print_list(None)
    assert capsys.readouterr().out == "\n"


@pytest.mark.parametrize("values", SAMPLES)
def test_has_cycle_false_for_plain_lists(values):
    assert has_cycle(build_list(values)) is False


@pytest.mark.parametrize("pos", [0, 1, 3])
def test_has_cycle_true_when_tail_links_back(pos):
    head = build_list([3, 2, 0, -4, 7])
    nodes = _nodes(head)
    nodes[-1].next = nodes[pos]
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 2, 1], True), ([1, 2, 1], True), ([1, 2], False)],
)
def test_is_palindrome_list(values, expected):
    assert is_palindrome_list(build_list(values)) is expected


@pytest.mark.parametrize(
    "values, val", [([1, 2, 6, 3, 4, 5, 6], 6), ([7, 7, 7, 7], 7), ([], 1), ([1, 2], 3)]
)
def test_remove_elements(values, val):
    assert to_values(remove_elements(build_list(values), val)) == [
        v for v in values if v != val
    ]


@pytest.mark.parametrize("values", [v for v in SAMPLES if len(v) >= 2])
def test_rotate_right_by_one_moves_tail_to_front(values):
    result = to_values(rotate_right(build_list(values), 1))
    assert result[0] == values[-1]
    assert result[1:] == values[:-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_rotate_right_full_turn_is_identity(values):
    assert to_values(rotate_right(build_list(values), len(values))) == values
    assert to_values(rotate_right(build_list(values), 0)) == values


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
@pytest.mark.parametrize("k", [1, 2, 5, 13])
def test_rotate_right_composes_to_identity(values, k):
    n = len(values)
    once = rotate_right(build_list(values), k)
    back = rotate_right(once, n - k % n)
    assert to_values(back) == values


def test_rotate_right_negative_raises():
    with pytest.raises(ValueError):
        rotate_right(build_list([1, 2]), -1)


@pytest.mark.parametrize("values", SAMPLES)
def test_odd_even_list(values):
    result = to_values(odd_even_list(build_list(values)))
    assert result == values[0::2] + values[1::2]


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_swap_nodes_every_k(values):
    for k in range(1, len(values) + 1):
        expected = list(values)
        expected[k - 1], expected[-k] = expected[-k], expected[k - 1]
        assert to_values(swap_nodes(build_list(values), k)) == expected


@pytest.mark.parametrize("k", [0, 4])
def test_swap_nodes_out_of_range(k):
    with pytest.raises(ValueError):
        swap_nodes(build_list([1, 2, 3]), k)