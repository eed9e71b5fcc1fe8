"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list.

        Iterating a list that contains a cycle never terminates.
        """
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list from ``values`` and return its head (None if empty)."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev: ListNode | None = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Remove the middle node (index ``len // 2``) and return the head."""
    if head is None or head.next is None:
        return None
    prev = head
    slow = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    prev.next = slow.next
    return head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the ``n``-th node counted from the end (1-based).

    Raises ValueError if ``n`` is not between 1 and the list length.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    fast: ListNode | None = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"n={n} exceeds the list length")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between each pair of adjacent nodes a node holding their GCD."""
    curr = head
    while curr is not None and curr.next is not None:
        inserted = ListNode(math.gcd(curr.val, curr.next.val), curr.next)
        curr.next = inserted
        curr = inserted.next
    return head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """From a sorted list, drop every value that occurs more than once."""
    dummy = ListNode(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.next is not None and node.val == node.next.val:
            while node.next is not None and node.val == node.next.val:
                node = node.next
            prev.next = node.next
        else:
            prev = prev.next
        node = node.next
    return dummy.next


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Move nodes below ``x`` before the others, keeping relative order."""
    before_head = ListNode()
    after_head = ListNode()
    before = before_head
    after = after_head
    node = head
    while node is not None:
        if node.val < x:
            before.next = node
            before = node
        else:
            after.next = node
            after = node
        node = node.next
    after.next = None
    before.next = after_head.next
    return before_head.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian decimal digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def delete_node(node: ListNode) -> None:
    """Delete ``node`` from its list given only that node; it must not be the tail."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the tail node in place")
    node.val = following.val
    node.next = following.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for even lengths, the second of the two middles."""
    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties favour ``list1``."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def print_list(head: ListNode | None) -> None:
    """Print each value followed by a space, then a newline."""
    print("".join(f"{value} " for value in to_values(head)))


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    if head is None or head.next is None:
        return False
    slow: ListNode | None = head
    fast: ListNode | None = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return False
        slow = slow.next
        fast = fast.next.next
    return True


def is_palindrome_list(head: ListNode | None) -> bool:
    """Return True if the list reads the same in both directions."""
    values = to_values(head)
    return values == values[::-1]


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node whose value equals ``val``."""
    dummy = ListNode(-1, head)
    current = dummy
    while current.next is not None:
        if current.next.val == val:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by ``k`` places."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    new_tail = head
    for _ in range(length - k % length - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even: ListNode | None = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def swap_nodes(head: ListNode | None, k: int) -> ListNode | None:
    """Swap the values of the ``k``-th node from the start and from the end."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    first = head
    for _ in range(k - 1):
        if first is None:
            break
        first = first.next
    if first is None:
        raise ValueError(f"k={k} exceeds the list length")
    second = head
    probe = first
    while probe.next is not None:
        probe = probe.next
        second = second.next
    first.val, second.val = second.val, first.val
    return head