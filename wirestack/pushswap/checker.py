"""Verifying that a list of push_swap instructions sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import IO

from wirestack.lines import iter_lines
from wirestack.pushswap.parsing import ArgumentError, parse_arguments
from wirestack.pushswap.stacks import Command, Stacks


class CommandError(ValueError):
    """Raised when an input line is not exactly one known instruction."""


def parse_command(line: str) -> Command:
    """Parse one input line, which must be an instruction followed by a newline."""
    if not line.endswith("\n"):
        raise CommandError(f"unterminated instruction: {line!r}")
    try:
        return Command(line[:-1])
    except ValueError:
        raise CommandError(f"unknown instruction: {line!r}") from None


def read_commands(stream: IO[str]) -> Iterator[Command]:
    """Yield the instructions of ``stream`` one line at a time."""
    for line in iter_lines(stream, keep_newline=True):
        yield parse_command(line)


def load_stack(args: Iterable[str]) -> Stacks:
    """Build the two stacks from the program arguments; raise ArgumentError if invalid."""
    return Stacks(parse_arguments(args))


def check(values: Iterable[int], commands: Iterable[Command]) -> bool:
    """True when applying ``commands`` to ``values`` leaves them sorted in ``a``."""
    stacks = Stacks(values)
    for command in commands:
        stacks.apply(command)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        stacks = load_stack(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    try:
        for command in read_commands(sys.stdin):
            stacks.apply(command)
    except CommandError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if stacks.is_solved() else "KO\n")
    return 0