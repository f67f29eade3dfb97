"""Command that checks whether a list of instructions sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ArgumentError, parse_arguments
from pushswap.stacks import Operation, Stacks

_BY_LINE = {f"{operation.value}\n": operation for operation in Operation}


def parse_instruction(line: str) -> Operation | None:
    """Return the operation a line names, or None if it names none.

    A line counts only when it is an operation name followed by a newline;
    anything else, including a last line with no newline, is ignored.
    """
    return _BY_LINE.get(line)


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Apply every recognised instruction line to fresh stacks built from values."""
    stacks = Stacks(values)
    for line in lines:
        operation = parse_instruction(line)
        if operation is not None:
            stacks.apply(operation)
    return stacks


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True when the instructions leave ``a`` sorted and ``b`` empty."""
    return run_instructions(values, lines).is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    if not values:
        return 0
    sys.stdout.write("OK\n" if check(values, sys.stdin) else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())