"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """An instruction, named as it is written on the wire."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def _swap(stack: deque[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(target: deque[int], source: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()

    def apply(self, operation: Operation | str) -> Operation:
        """Carry out one operation and return it as an :class:`Operation`.

        Raises ValueError for an unknown instruction name.
        """
        op = Operation(operation)
        if op is Operation.SA:
            _swap(self.a)
        elif op is Operation.SB:
            _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
        elif op is Operation.PA:
            _push(self.a, self.b)
        elif op is Operation.PB:
            _push(self.b, self.a)
        elif op is Operation.RA:
            _rotate(self.a)
        elif op is Operation.RB:
            _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif op is Operation.RRA:
            _reverse_rotate(self.a)
        elif op is Operation.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
        return op

    def is_sorted(self) -> bool:
        """True when ``a`` is in ascending order and ``b`` is empty."""
        return not self.b and is_sorted(self.a)

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"