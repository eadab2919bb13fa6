"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Node:
    """One cell of a linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> None:
        """Insert value before the first element."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append value after the last element."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def last(self) -> Any:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to every value."""
        return LinkedList(func(value) for value in self)

    def clear(self, func: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each value to func first if given."""
        while self.head is not None:
            value = self.pop_front()
            if func is not None:
                func(value)