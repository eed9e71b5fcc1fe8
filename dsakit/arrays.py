"""Algorithms over lists of integers."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence
from functools import reduce
from itertools import combinations
from operator import xor


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that is absent from ``nums``."""
    return reduce(xor, (i ^ v for i, v in enumerate(nums)), len(nums))


def array_sign(nums: Sequence[int]) -> int:
    """Return the sign (-1, 0 or 1) of the product of ``nums``."""
    sign = 1
    for num in nums:
        if num == 0:
            return 0
        if num < 0:
            sign = -sign
    return sign


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first index pair ``[i, j]`` (i < j) summing to ``target``, or []."""
    for (i, first), (j, second) in combinations(enumerate(nums), 2):
        if first + second == target:
            return [i, j]
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    min_price = math.inf
    best = 0
    for price in prices:
        if price < min_price:
            min_price = price
        else:
            best = max(best, price - min_price)
    return int(best)


def find_gcd(nums: Sequence[int]) -> int:
    """Return the greatest common divisor of the smallest and largest values."""
    if not nums:
        raise ValueError("find_gcd() requires at least one number")
    return math.gcd(min(nums), max(nums))


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than half the time (Boyer-Moore vote)."""
    count = 0
    candidate = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    return bisect_left(nums, target)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``, in place.

    Returns the same list for convenience.
    """
    for i in reversed(range(len(digits))):
        if digits[i] < 9:
            digits[i] += 1
            return digits
        digits[i] = 0
    digits.insert(0, 1)
    return digits