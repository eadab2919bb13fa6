import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parser import (
    ParseError,
    check_arguments,
    is_number_format,
    parse_numbers,
    split_words,
)


@pytest.mark.parametrize("text", ["5", "+5", "-5", "0012", ""])
def test_valid_formats(text):
    assert is_number_format(text) is True


@pytest.mark.parametrize("text", ["-", "+", "5-", "--5", "+-1", "1a", " 5", "1.5"])
def test_invalid_formats(text):
    assert is_number_format(text) is False


def test_split_words():
    assert split_words("1 2  3") == ["1", "2", "3"]
    assert split_words(" 7 ") == [" 7 "]


def test_check_arguments():
    assert check_arguments(["1", "2 3"]) is True
    assert check_arguments(["1", "x"]) is False
    assert check_arguments(["1 y"]) is False
    assert check_arguments([" 4"]) is False


def test_parse_mixed_arguments():
    assert parse_numbers(["3 2 1", "-4", "+5"]) == [3, 2, 1, -4, 5]


def test_parse_int_max():
    assert parse_numbers(["2147483647"]) == [2147483647]


def test_empty_argument_reads_as_zero():
    assert parse_numbers([""]) == [0]


def test_blank_argument_adds_nothing():
    assert parse_numbers(["   ", "9"]) == [9]


@pytest.mark.parametrize(
    "args",
    [
        ["2147483648"],
        ["-2147483648"],
        ["000000000001"],
        ["1", "1"],
        ["1 2", "2"],
        ["abc"],
        ["-"],
    ],
)
def test_rejected_arguments(args):
    with pytest.raises(ParseError):
        parse_numbers(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_numbers(["7", "7"])


@given(
    st.lists(
        st.integers(min_value=-2147483647, max_value=2147483647),
        unique=True,
        min_size=1,
        max_size=30,
    )
)
def test_round_trip(numbers):
    words = [str(n) for n in numbers]
    assert parse_numbers(words) == numbers
    assert parse_numbers([" ".join(words)]) == numbers