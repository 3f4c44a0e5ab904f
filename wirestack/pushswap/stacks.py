"""The two stacks of the push_swap puzzle and the commands that act on them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class Command(enum.Enum):
    """A push_swap instruction, valued by its textual name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stack:
    """A circular stack whose first element is the top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> Any:
        """Return the top element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[0]

    def push_from(self, other: Stack) -> None:
        """Move the top element of ``other`` onto this stack; no-op if it is empty."""
        if other._items:
            self._items.appendleft(other._items.popleft())

    def swap(self) -> None:
        """Exchange the two top elements; no-op with fewer than two."""
        if len(self._items) >= 2:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)

    def rotate(self, reverse: bool = False) -> None:
        """Move the top to the bottom, or the bottom to the top when ``reverse``."""
        if self._items:
            self._items.rotate(1 if reverse else -1)


class Stacks:
    """Stacks ``a`` and ``b``, with a record of every applied command."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.history: list[Command] = []

    def apply(self, command: Command) -> None:
        """Carry out ``command`` and append it to the history."""
        command = Command(command)
        match command:
            case Command.SA:
                self.a.swap()
            case Command.SB:
                self.b.swap()
            case Command.SS:
                self.a.swap()
                self.b.swap()
            case Command.PA:
                self.a.push_from(self.b)
            case Command.PB:
                self.b.push_from(self.a)
            case Command.RA:
                self.a.rotate(False)
            case Command.RB:
                self.b.rotate(False)
            case Command.RR:
                self.a.rotate(False)
                self.b.rotate(False)
            case Command.RRA:
                self.a.rotate(True)
            case Command.RRB:
                self.b.rotate(True)
            case Command.RRR:
                self.a.rotate(True)
                self.b.rotate(True)
        self.history.append(command)

    def is_solved(self) -> bool:
        """True when ``a`` is strictly increasing from the top and ``b`` is empty."""
        if len(self.b):
            return False
        values = list(self.a)
        return all(x < y for x, y in zip(values, values[1:]))