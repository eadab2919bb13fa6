"""Checking and reading the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.kml.split import split

INT_MAX = 2147483647
_MAX_TEXT_LENGTH = 11
_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str) -> list[str]:
    """Split an argument on spaces into its number words."""
    return split(text, " ")


def is_number_format(text: str) -> bool:
    """True when text is digits with at most one leading sign.

    A lone sign is rejected; the empty text is accepted.
    """
    if text in ("-", "+"):
        return False
    return all(
        "0" <= ch <= "9" or (ch in "+-" and index == 0)
        for index, ch in enumerate(text)
    )


def _words_of(arg: str) -> list[str]:
    return split_words(arg) if " " in arg else [arg]


def check_arguments(args: Iterable[str]) -> bool:
    """True when every word of every argument has a number format."""
    return all(is_number_format(word) for arg in args for word in _words_of(arg))


def _to_int(word: str) -> int:
    """Read a validated number word, rejecting values beyond the int range."""
    rest = word.lstrip(_WHITESPACE)
    negative = rest[:1] == "-"
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for ch in rest:
        value = value * 10 + (ord(ch) - ord("0"))
        if value > INT_MAX or len(word) > _MAX_TEXT_LENGTH:
            raise ParseError()
    return -value if negative else value


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Return the integers in the arguments, in order.

    Raises ParseError for a badly formed word, a value whose magnitude
    exceeds 2147483647, a word longer than 11 characters, or a repeated value.
    """
    args = list(args)
    if not check_arguments(args):
        raise ParseError()
    numbers = [_to_int(word) for arg in args for word in _words_of(arg)]
    if len(set(numbers)) != len(numbers):
        raise ParseError()
    return numbers