"""Command line entry: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from pushswap.parser import ParseError, check_arguments, parse_numbers
from pushswap.sort import sort_stacks
from pushswap.stack import Stacks


def has_no_digit(args: Iterable[str]) -> bool:
    """True when no argument contains a decimal digit."""
    return not any("0" <= ch <= "9" for arg in args for ch in arg)


def solve(args: Iterable[str]) -> list[str]:
    """Return the moves that sort the integers in args.

    Raises ParseError when the arguments are empty, hold no digit, are
    badly formed, out of range or repeat a value.
    """
    args = list(args)
    if not args or has_no_digit(args) or not check_arguments(args):
        raise ParseError()
    stacks = Stacks(parse_numbers(args))
    sort_stacks(stacks)
    return stacks.operations


def main(argv: list[str] | None = None) -> int:
    """Print one move per line; report bad input as Error on stderr."""
    args = sys.argv[1:] if argv is None else argv
    try:
        operations = solve(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())