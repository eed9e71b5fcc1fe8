"""Bracket matching and evaluation of simple arithmetic expressions."""

from __future__ import annotations

import string
from collections.abc import Iterable

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def is_valid_brackets(s: str) -> bool:
    """Return True if the brackets in ``s`` are balanced and properly nested.

    Every character that is not an opening bracket closes the latest open one.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENING:
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _CLOSING_TO_OPENING.get(ch)
        if expected is not None and expected != top:
            return False
    return not stack


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate a reverse Polish expression; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        operation = _OPERATORS.get(token)
        if operation is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(operation(a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def check_valid_string(s: str) -> bool:
    """Return True if ``s`` can be balanced with each '*' as '(', ')' or nothing."""
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low -= 1
            high -= 1
        elif ch == "*":
            low -= 1
            high += 1
        if high < 0:
            return False
        low = max(low, 0)
    return low == 0


def calculate(s: str) -> int:
    """Evaluate an expression of integers, '+', '-' and parentheses.

    Other characters, such as spaces, are ignored.
    """
    result = 0
    number = 0
    sign = 1
    saved: list[tuple[int, int]] = []
    for ch in s:
        if ch in string.digits:
            number = number * 10 + int(ch)
        elif ch in "+-":
            result += sign * number
            number = 0
            sign = 1 if ch == "+" else -1
        elif ch == "(":
            saved.append((result, sign))
            result = 0
            sign = 1
        elif ch == ")":
            if not saved:
                raise ValueError("unbalanced ')' in expression")
            result += sign * number
            number = 0
            outer_result, outer_sign = saved.pop()
            result = outer_result + outer_sign * result
    return result + sign * number