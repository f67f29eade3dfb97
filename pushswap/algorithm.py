"""Cost-driven sorting of stack ``a`` using stack ``b`` as scratch space."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter

from pushswap.stacks import Operation, Stacks, is_sorted


@dataclass(frozen=True)
class Cost:
    """What it takes to move one element of ``a`` into place on ``b``.

    ``a_reverse`` and ``b_reverse`` tell whether each stack is brought into
    position with reverse rotations rather than rotations; ``cost`` counts
    every operation needed, the final push included.
    """

    value: int
    cost: int
    a_moves: int
    b_moves: int
    a_reverse: bool
    b_reverse: bool


def find_first_under(value: int, stack: Iterable[int]) -> int | None:
    """The largest element below ``value``, or None if there is none."""
    return max((item for item in stack if item < value), default=None)


def find_first_sup(value: int, stack: Iterable[int]) -> int | None:
    """The smallest element above ``value``, or None if there is none."""
    return min((item for item in stack if item > value), default=None)


class Sorter:
    """Sorts a list of distinct integers, recording the operations used."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(values)
        self.operations: list[Operation] = []

    def _do(self, operation: Operation, times: int = 1) -> None:
        for _ in range(times):
            self.stacks.apply(operation)
            self.operations.append(operation)

    def calculate_costs(self) -> list[Cost]:
        """Cost of pushing each element of ``a`` (top first) onto ``b``.

        Raises ValueError when ``b`` is empty.
        """
        a, b = self.stacks.a, self.stacks.b
        if not b:
            raise ValueError("stack b is empty")
        size = len(a)
        half = size // 2
        b_len = len(b)
        b_median = b_len // 2
        b_sorted = sorted(b)
        b_index = {item: index for index, item in enumerate(b)}
        smallest = b_sorted[0]
        index_min = b_index[smallest]

        costs: list[Cost] = []
        for index, value in enumerate(a):
            a_reverse = index > half
            a_moves = size - index if a_reverse else index
            if value < smallest:
                b_reverse = index_min >= b_median
                b_moves = b_len - index_min - 1 if b_reverse else index_min + 1
            else:
                under = b_sorted[bisect_left(b_sorted, value) - 1]
                under_index = b_index[under]
                b_reverse = under_index > b_median
                b_moves = b_len - under_index if b_reverse else under_index
            if a_reverse == b_reverse:
                cost = max(a_moves, b_moves)
            else:
                cost = a_moves + b_moves
            costs.append(
                Cost(value, cost + 1, a_moves, b_moves, a_reverse, b_reverse)
            )
        return costs

    def _push_cheapest(self) -> None:
        cheapest = min(self.calculate_costs(), key=attrgetter("cost"))
        a_op = Operation.RRA if cheapest.a_reverse else Operation.RA
        b_op = Operation.RRB if cheapest.b_reverse else Operation.RB
        if cheapest.a_reverse == cheapest.b_reverse:
            both = Operation.RRR if cheapest.a_reverse else Operation.RR
            common = min(cheapest.a_moves, cheapest.b_moves)
            self._do(a_op, cheapest.a_moves - common)
            self._do(b_op, cheapest.b_moves - common)
            self._do(both, common)
        else:
            self._do(a_op, cheapest.a_moves)
            self._do(b_op, cheapest.b_moves)
        self._do(Operation.PB)

    def _push_back(self) -> None:
        a = self.stacks.a
        top = self.stacks.b[0]
        size = len(a)
        median = size // 2
        largest = max(a)
        if top > largest:
            index = a.index(largest)
            if index < median:
                self._do(Operation.RA, index + 1)
            else:
                self._do(Operation.RRA, size - 1 - index)
        else:
            index = a.index(find_first_sup(top, a))
            if index <= median:
                self._do(Operation.RA, index)
            else:
                self._do(Operation.RRA, size - index)
        self._do(Operation.PA)

    def _sort_three(self) -> None:
        a = self.stacks.a
        first, second, last = a[0], a[1], a[-1]
        if first > second and first < last:
            self._do(Operation.SA)
        elif first < second and second > last and first < last:
            self._do(Operation.RRA)
            self._do(Operation.SA)
        elif first > second and second < last:
            self._do(Operation.RA)
        elif first > second and second > last:
            self._do(Operation.RA)
            self._do(Operation.SA)
        elif first < second and second > last and first > last:
            self._do(Operation.RRA)

    def _bring_minimum_to_top(self) -> None:
        a = self.stacks.a
        size = len(a)
        index = a.index(min(a))
        if index <= size // 2:
            self._do(Operation.RA, index)
        else:
            self._do(Operation.RRA, size - index)

    def sort(self) -> list[Operation]:
        """Sort stack ``a`` and return every operation performed so far."""
        a = self.stacks.a
        if is_sorted(a):
            return list(self.operations)
        if len(a) == 2:
            if a[0] > a[1]:
                self._do(Operation.SA)
        elif len(a) == 3:
            self._sort_three()
        else:
            self._do(Operation.PB, 2)
            while len(a) > 3:
                self._push_cheapest()
            self._sort_three()
            while self.stacks.b:
                self._push_back()
            self._bring_minimum_to_top()
        return list(self.operations)


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values`` on stack ``a``."""
    return Sorter(values).sort()