import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    ArgumentError,
    atoi,
    parse_arguments,
    split_words,
    validate,
)


def test_atoi_plain_and_signed():
    assert atoi("42") == 42
    assert atoi("-17") == -17
    assert atoi("+7") == 7


def test_atoi_limits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2147483647
    with pytest.raises(ValueError):
        atoi("2147483648")
    with pytest.raises(ValueError):
        atoi("-2147483649")


@pytest.mark.parametrize("text", ["", "-", "+", "12a", "a1", " 1", "1 ", "--1", "1.5"])
def test_atoi_rejects_malformed(text):
    with pytest.raises(ValueError):
        atoi(text)


@given(st.integers(-2147483648, 2147483647))
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_split_words_drops_empty():
    assert split_words("  1  2 3 ", " ") == ["1", "2", "3"]
    assert split_words("", " ") == []
    assert split_words("a,b,,c", ",") == ["a", "b", "c"]


@given(st.lists(st.text(alphabet="abc123", min_size=1), max_size=10))
def test_split_words_round_trip(words):
    assert split_words(" ".join(words), " ") == words


def test_validate_accepts_zero_only_as_plain_zero():
    assert validate(["0"]) == [0]
    for word in ("-0", "+0", "00"):
        with pytest.raises(ArgumentError):
            validate([word])


def test_validate_rejects_duplicates():
    with pytest.raises(ArgumentError):
        validate(["1", "2", "1"])
    with pytest.raises(ArgumentError):
        validate(["1", "+1"])


def test_validate_rejects_non_numbers():
    with pytest.raises(ArgumentError):
        validate(["1", "two"])


def test_argument_error_message():
    with pytest.raises(ArgumentError, match="^Error$"):
        validate(["x"])


def test_parse_arguments_empty():
    assert parse_arguments([]) == []
    assert parse_arguments([""]) == []


def test_parse_arguments_single_string_is_split():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_parse_arguments_many():
    assert parse_arguments(["3", "-2", "1"]) == [3, -2, 1]


def test_parse_arguments_many_are_not_split():
    with pytest.raises(ArgumentError):
        parse_arguments(["3 2", "1"])


@given(st.lists(st.integers(-2147483648, 2147483647), unique=True, min_size=2, max_size=20))
def test_parse_arguments_round_trip(values):
    args = [str(v) for v in values]
    assert parse_arguments(args) == values
    assert parse_arguments([" ".join(args)]) == values