"""Command that prints the operations sorting its integer arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import sort_operations
from pushswap.parsing import ArgumentError, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as ``Error``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    operations = sort_operations(values)
    if operations:
        sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())