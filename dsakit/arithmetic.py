"""Integer and digit puzzles: squares, digits, column titles and friends."""

from __future__ import annotations

import math
import string

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_ALPHABET = string.ascii_uppercase


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def bulb_switch(n: int) -> int:
    """Count bulbs left on after ``n`` toggling rounds (the perfect squares <= n)."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return math.isqrt(n)


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    while n >= 5:
        n //= 5
        count += n
    return count


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= reversed_value <= _INT32_MAX:
        return 0
    return reversed_value


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number."""
    letters: list[str] = []
    while column_number > 0:
        column_number, remainder = divmod(column_number - 1, 26)
        letters.append(_ALPHABET[remainder])
    return "".join(reversed(letters))


def title_to_number(column_title: str) -> int:
    """Return the 1-based column number of a spreadsheet column title."""
    result = 0
    for ch in column_title:
        position = _ALPHABET.find(ch)
        if position < 0:
            raise ValueError(f"invalid column letter {ch!r}")
        result = result * 26 + position + 1
    return result


def judge_square_sum(c: int) -> bool:
    """Return True if ``c`` is the sum of two perfect squares."""
    left = 0
    right = math.isqrt(c)
    while left <= right:
        total = left * left + right * right
        if total == c:
            return True
        if total < c:
            left += 1
        else:
            right -= 1
    return False


def add_digits(num: int) -> int:
    """Repeatedly sum the digits of ``num`` until a single digit remains."""
    while num > 9:
        num = sum(_digits(num))
    return num


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (0-based) of Pascal's triangle."""
    row = [1]
    value = 1
    for i in range(1, row_index + 1):
        value = value * (row_index - i + 1) // i
        row.append(value)
    return row


def check_perfect_number(num: int) -> bool:
    """Return True if ``num`` equals the sum of its proper positive divisors."""
    if num == 1:
        return False
    total = 1
    i = 2
    while i * i <= num:
        if num % i == 0:
            total += i
            if i != num // i:
                total += num // i
        i += 1
    return total == num


def is_palindrome_number(x: int) -> bool:
    """Return True if ``x`` reads the same forwards and backwards."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def is_perfect_square(num: int) -> bool:
    """Return True if ``num`` is the square of an integer."""
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num


def is_happy(n: int) -> bool:
    """Return True if summing squared digits repeatedly reaches 1."""
    seen: set[int] = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = sum(d * d for d in _digits(n)) if n > 0 else 0
    return n == 1


def find_nth_digit(n: int) -> int:
    """Return the ``n``-th digit (1-based) of the sequence 123456789101112..."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    digit_length = 1
    count = 9
    start = 1
    while n > digit_length * count:
        n -= digit_length * count
        digit_length += 1
        count *= 10
        start *= 10
    index, offset = divmod(n - 1, digit_length)
    return int(str(start + index)[offset])