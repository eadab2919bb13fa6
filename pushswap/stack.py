"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

INT_MAX = 2147483647
INT_MIN = -2147483648


@dataclass(slots=True)
class Element:
    """A number on a stack with its rank and its half-of-stack flag."""

    number: int
    index: int = 0
    median: bool = False


class Stacks:
    """Stacks a and b, tops on the left, with a log of the moves made.

    A move that changes nothing is not logged. The double moves ss, rr and
    rrr act on both stacks but are logged only when both stacks changed.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[Element] = deque(Element(number) for number in numbers)
        self.b: deque[Element] = deque()
        self.operations: list[str] = []
        self.assign_indices()

    def __repr__(self) -> str:
        a = [element.number for element in self.a]
        b = [element.number for element in self.b]
        return f"Stacks(a={a!r}, b={b!r})"

    def _stack(self, which: str) -> deque[Element]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"unknown stack {which!r}, expected 'a' or 'b'")

    def _log(self, name: str, done: bool) -> bool:
        if done:
            self.operations.append(name)
        return done

    @staticmethod
    def _swap(stack: deque[Element]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[Element], target: deque[Element]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[Element], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> bool:
        """Swap the two top elements of a."""
        return self._log("sa", self._swap(self.a))

    def sb(self) -> bool:
        """Swap the two top elements of b."""
        return self._log("sb", self._swap(self.b))

    def ss(self) -> bool:
        """Swap the tops of a and b at once."""
        done_a = self._swap(self.a)
        done_b = self._swap(self.b)
        return self._log("ss", done_a and done_b)

    def pa(self) -> bool:
        """Move the top of b onto a."""
        return self._log("pa", self._push(self.b, self.a))

    def pb(self) -> bool:
        """Move the top of a onto b."""
        return self._log("pb", self._push(self.a, self.b))

    def ra(self) -> bool:
        """Move the top of a to its bottom."""
        return self._log("ra", self._rotate(self.a, -1))

    def rb(self) -> bool:
        """Move the top of b to its bottom."""
        return self._log("rb", self._rotate(self.b, -1))

    def rr(self) -> bool:
        """Rotate a and b at once."""
        done_a = self._rotate(self.a, -1)
        done_b = self._rotate(self.b, -1)
        return self._log("rr", done_a and done_b)

    def rra(self) -> bool:
        """Move the bottom of a to its top."""
        return self._log("rra", self._rotate(self.a, 1))

    def rrb(self) -> bool:
        """Move the bottom of b to its top."""
        return self._log("rrb", self._rotate(self.b, 1))

    def rrr(self) -> bool:
        """Reverse-rotate a and b at once."""
        done_a = self._rotate(self.a, 1)
        done_b = self._rotate(self.b, 1)
        return self._log("rrr", done_a and done_b)

    def is_sorted(self, which: str = "a", reverse: bool = False) -> bool:
        """Check the indices of a stack from the top.

        Ascending order must be strictly increasing from the top. The
        descending check starts from the same floor of -1, so it holds only
        for an empty stack.
        """
        previous = -1
        for element in self._stack(which):
            if reverse:
                if element.index >= previous:
                    return False
            elif element.index <= previous:
                return False
            previous = element.index
        return True

    def find_min(self, which: str) -> int:
        """Smallest index on a stack; INT_MAX when it is empty."""
        return min((e.index for e in self._stack(which)), default=INT_MAX)

    def find_max(self, which: str) -> int:
        """Largest index on a stack; INT_MIN when it is empty."""
        return max((e.index for e in self._stack(which)), default=INT_MIN)

    def assign_indices(self) -> None:
        """Give every element of a its rank among the numbers of a, from 0."""
        ranked = sorted(self.a, key=lambda element: element.number)
        for rank, element in enumerate(ranked):
            element.index = rank

    def set_median(self) -> None:
        """Flag the elements in the lower half of each stack.

        Of n elements the last n // 2 are flagged, the rest cleared.
        """
        for stack in (self.a, self.b):
            limit = len(stack) // 2
            if len(stack) % 2 == 0:
                limit -= 1
            for position, element in enumerate(stack):
                element.median = position > limit