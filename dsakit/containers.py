"""Stack and queue variants built from other containers."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A stack that reports its minimum element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._items.append(val)
        if not self._mins or val <= self._mins[-1]:
            self._mins.append(val)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        val = self._items.pop()
        if val == self._mins[-1]:
            self._mins.pop()
        return val

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._mins:
            raise IndexError("minimum of empty stack")
        return self._mins[-1]


class TwoStackQueue:
    """A FIFO queue implemented with two stacks."""

    def __init__(self) -> None:
        self._input: list[int] = []
        self._output: list[int] = []

    def __len__(self) -> int:
        return len(self._input) + len(self._output)

    def _transfer_if_needed(self) -> None:
        if not self._output:
            while self._input:
                self._output.append(self._input.pop())

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._input.append(x)

    def pop(self) -> int:
        """Remove and return the front element."""
        self._transfer_if_needed()
        if not self._output:
            raise IndexError("pop from empty queue")
        return self._output.pop()

    def peek(self) -> int:
        """Return the front element without removing it."""
        self._transfer_if_needed()
        if not self._output:
            raise IndexError("peek at empty queue")
        return self._output[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._input and not self._output


class QueueStack:
    """A LIFO stack implemented with two queues."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._main)

    def push(self, x: int) -> None:
        """Push ``x`` so that it is the next element returned."""
        self._spare.append(x)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._main:
            raise IndexError("pop from empty stack")
        return self._main.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._main:
            raise IndexError("top of empty stack")
        return self._main[0]

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._main