import random

import pytest

from pushswap.cli import has_no_digit, main, solve
from pushswap.parser import ParseError
from pushswap.stack import Stacks


def _apply(numbers, operations):
    stacks = Stacks(numbers)
    for operation in operations:
        getattr(stacks, operation)()
    return [e.number for e in stacks.a], len(stacks.b)


def test_has_no_digit():
    assert has_no_digit(["abc", "-", "+"])
    assert not has_no_digit(["a1"])
    assert has_no_digit([])


def test_solve_two_numbers():
    assert solve(["2", "1"]) == ["ra"]


def test_solve_accepts_space_separated_argument():
    operations = solve(["4 -2 9", "0"])
    assert _apply([4, -2, 9, 0], operations) == ([-2, 0, 4, 9], 0)


@pytest.mark.parametrize(
    "args",
    [[], ["abc"], ["1", "a"], ["1", "1"], ["2147483648"], ["1 "], ["-"]],
)
def test_solve_rejects_bad_input(args):
    with pytest.raises(ParseError):
        solve(args)


def test_main_prints_moves(capsys):
    assert main(["3", "2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "ra\nsa\n"
    assert captured.err == ""


def test_main_single_number_prints_nothing(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [[], ["x"], ["1", "2", "1"], ["99999999999"]])
def test_main_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_output_sorts_hundred_numbers(capsys):
    numbers = random.Random(7).sample(range(-5000, 5000), 100)
    assert main([str(n) for n in numbers]) == 0
    operations = capsys.readouterr().out.split()
    assert _apply(numbers, operations) == (sorted(numbers), 0)