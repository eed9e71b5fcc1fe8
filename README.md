# dsakit

A small collection of classic data-structure and algorithm routines, written
as plain Python functions and classes with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.linked_list`

A singly linked `ListNode` (fields `val` and `next`) that you can iterate over
to get its values. `build_list` and `to_values` convert to and from Python lists.

```python
from dsakit.linked_list import build_list, to_values, reverse_list, merge_two_lists

head = build_list([1, 2, 3, 4])
print(to_values(reverse_list(head)))                  # [4, 3, 2, 1]

merged = merge_two_lists(build_list([1, 3]), build_list([2, 4]))
print(list(merged))                                   # [1, 2, 3, 4]
```

Also available:

- `delete_middle(head)` – drop the node at index `len // 2`; a list of one node becomes empty.
- `remove_nth_from_end(head, n)` – `n` is 1-based; raises `ValueError` if out of range.
- `insert_greatest_common_divisors(head)` – put the GCD of each adjacent pair between them.
- `delete_duplicates(head)` – from a sorted list, remove every value that occurs more than once.
- `partition(head, x)` – nodes below `x` first, relative order kept.
- `add_two_numbers(l1, l2)` – add numbers stored as little-endian digit lists.
- `delete_node(node)` – delete a node given only that node; raises `ValueError` for the tail.
- `middle_node(head)` – the second middle for even lengths.
- `print_list(head)` – print the values separated by spaces.
- `has_cycle(head)`, `is_palindrome_list(head)`.
- `remove_elements(head, val)`, `rotate_right(head, k)`, `odd_even_list(head)`.
- `swap_nodes(head, k)` – swap the values of the k-th node from each end; raises `ValueError` for a bad `k`.

Functions that rearrange a list relink its nodes in place and return the new head.

### `dsakit.containers`

- `MinStack` – a stack with constant-time `get_min()` (`push`, `pop`, `top`, `get_min`).
- `TwoStackQueue` – a FIFO queue built from two stacks (`push`, `pop`, `peek`, `is_empty`).
- `QueueStack` – a LIFO stack built from queues (`push`, `pop`, `top`, `is_empty`).

All three support `len()` and raise `IndexError` when read while empty.

```python
from dsakit.containers import MinStack

stack = MinStack()
for value in (5, 2, 7):
    stack.push(value)
print(stack.get_min())   # 2
```

### `dsakit.arithmetic`

Integer puzzles: `bulb_switch`, `trailing_zeroes`, `reverse_integer` (0 when the
result leaves the signed 32-bit range), `convert_to_title`, `title_to_number`,
`judge_square_sum`, `add_digits`, `pascal_row`, `check_perfect_number`,
`is_palindrome_number`, `is_perfect_square`, `is_happy` and `find_nth_digit`.

```python
from dsakit.arithmetic import convert_to_title, title_to_number

print(convert_to_title(28))     # "AB"
print(title_to_number("ZY"))    # 701
```

### `dsakit.arrays`

Sequence routines: `missing_number`, `array_sign`, `two_sum` (first index pair
or `[]`), `contains_duplicate`, `max_profit`, `find_gcd` (GCD of the smallest and
largest values), `majority_element`, `search_insert`, `rotate` (in place, to the
right) and `plus_one` (modifies and returns the digit list).

### `dsakit.expressions`

- `is_valid_brackets("()[]{}")` – bracket matching.
- `eval_rpn(["2", "1", "+", "3", "*"])` – reverse Polish evaluation; division truncates toward zero.
- `check_valid_string("(*))")` – parentheses with `*` wildcards.
- `calculate("(1+(4+5+2)-3)+(6+8)")` – a `+`/`-` calculator with parentheses; spaces are ignored.

## What this package does not do

It is a library only: there is no command-line tool, and nothing reads input
from files or standard input.