"""Sorting strategies that solve stack a with the puzzle's moves."""

from __future__ import annotations

from pushswap.stack import Stacks


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def gen_chunk(size: int) -> int:
    """Width of the rank window used when spreading stack a onto stack b."""
    if size < 50:
        return 3 + _div_trunc(size - 6, 7)
    if size < 100:
        return 10 + _div_trunc(size - 50, 8)
    if size < 350:
        return 18 + _div_trunc(size - 100, 9)
    if size <= 500:
        return 27 + _div_trunc(size - 350, 15)
    return 37 + _div_trunc(size - 500, 20)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of at most three elements in at most two moves."""
    a = stacks.a
    if len(a) < 2:
        return
    largest = max(0, max(element.index for element in a))
    if a[-1].index < largest:
        if a[0].index > a[1].index:
            stacks.ra()
        else:
            stacks.rra()
    if a[0].index > a[1].index:
        stacks.sa()


def sort_four_or_five(stacks: Stacks) -> None:
    """Sort a small stack a by parking its two smallest ranks on b."""
    if stacks.is_sorted("a"):
        return
    if sum(element.index < 2 for element in stacks.a) < 2:
        raise ValueError("stack a must hold the ranks 0 and 1")
    while len(stacks.b) < 2:
        if stacks.a[0].index in (0, 1):
            stacks.pb()
        else:
            stacks.ra()
    if stacks.b[0].index == 0:
        stacks.sb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def _spread_to_b(stacks: Stacks, chunk: int) -> None:
    """Push a onto b in rank windows, sending the smallest ranks to b's bottom."""
    count = 0
    while stacks.a:
        index = stacks.a[0].index
        if index <= count:
            stacks.pb()
            stacks.rb()
            count += 1
        elif index <= count + chunk:
            stacks.pb()
            count += 1
        else:
            stacks.ra()


def _gather_to_a(stacks: Stacks) -> None:
    """Bring the largest rank of b to its top, the short way, and push it to a."""
    while stacks.b:
        stacks.set_median()
        highest = max(stacks.b, key=lambda element: element.index)
        from_bottom = highest.median
        while stacks.b[0] is not highest:
            if from_bottom:
                stacks.rrb()
            else:
                stacks.rb()
        stacks.pa()


def butterfly(stacks: Stacks) -> None:
    """Sort a larger stack a by spreading it onto b and gathering it back."""
    if stacks.is_sorted("a"):
        return
    _spread_to_b(stacks, gen_chunk(len(stacks.a)))
    _gather_to_a(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a, choosing the strategy by its size."""
    size = len(stacks.a)
    if size <= 1:
        return
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_four_or_five(stacks)
    else:
        butterfly(stacks)