"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Parse an optionally signed decimal integer that fits in 32 bits.

    The whole string must be consumed. Raises ValueError otherwise.
    """
    body = text
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or any(ch not in _DIGITS for ch in body):
        raise ValueError(f"not an integer: {text!r}")
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split on a single character, dropping empty words."""
    return [word for word in text.split(separator) if word]


def validate(words: Sequence[str]) -> list[int]:
    """Convert words to integers, rejecting bad numbers and duplicates."""
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        try:
            value = atoi(word)
        except ValueError:
            raise ArgumentError() from None
        if value in seen or (value == 0 and word != "0"):
            raise ArgumentError()
        seen.add(value)
        values.append(value)
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments (without the program name) into values.

    A single argument is split on spaces; several are taken one number each.
    """
    if not args:
        return []
    if len(args) == 1:
        return validate(split_words(args[0], " "))
    return validate(args)