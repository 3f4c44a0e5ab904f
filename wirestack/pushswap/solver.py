"""Producing a short push_swap instruction list that sorts stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wirestack.pushswap.lis import circular_lis
from wirestack.pushswap.parsing import (
    ArgumentError,
    is_strictly_increasing,
    parse_arguments,
    quick_select,
)
from wirestack.pushswap.stacks import Command, Stacks

_CHUNK_THRESHOLD = 50


def find_insert_point(values: Sequence[int], target: int) -> int:
    """Index in the circularly sorted ``values`` before which ``target`` belongs."""
    if not values:
        raise ValueError("cannot insert into an empty sequence")
    left, right = 0, len(values) - 1
    if values[left] < values[right] and (target < values[left] or target > values[right]):
        return 0
    if values[right] < target < values[left]:
        return 0
    while right - left > 1:
        mid = (right - left) // 2 + left
        if (values[mid] < values[right] and values[mid] < target < values[right]) or (
            values[mid] > values[right]
            and (target <= values[left] or target >= values[mid])
        ):
            left = mid
        else:
            right = mid
    return right


def find_chunk_point(values: Sequence[int]) -> int:
    """The value at three fifths of the way through ``values`` in sorted order."""
    return quick_select(values, (len(values) - 1) * 3 // 5)


def min_rotation(index: int, total: int) -> int:
    """Signed rotation bringing ``index`` to the top: positive forward, negative back."""
    if index <= total // 2:
        return index
    return -(total - index)


def sort_small(values: Sequence[int]) -> list[Command]:
    """Instructions sorting two or three values without using stack ``b``."""
    if len(values) == 2:
        return [Command.SA] if values[0] > values[1] else []
    l1, l2, l3 = values
    if l1 < l3 < l2:
        return [Command.SA, Command.RA]
    if l2 < l1 < l3:
        return [Command.SA]
    if l3 < l1 < l2:
        return [Command.RRA]
    if l2 < l3 < l1:
        return [Command.RA]
    if l3 < l2 < l1:
        return [Command.SA, Command.RRA]
    return []


def separate(stacks: Stacks) -> None:
    """Keep a circular LIS in ``a``, pushing the rest to ``b`` or slotting it back."""
    values = list(stacks.a)
    keep = {value for value, flag in zip(values, circular_lis(values)) if flag}
    lis_started = False
    for _ in range(len(values)):
        if stacks.a.top() not in keep:
            stacks.apply(Command.PB)
            if (
                len(stacks.a) + len(stacks.b) > _CHUNK_THRESHOLD
                and len(stacks.b) > 1
                and find_chunk_point(list(stacks.b)[1:]) < stacks.b.top()
            ):
                stacks.apply(Command.RB)
        else:
            while (
                lis_started
                and len(stacks.b)
                and stacks.a.top() > stacks.b.top()
                and list(stacks.a)[-1] < stacks.b.top()
            ):
                stacks.apply(Command.PA)
                stacks.apply(Command.RA)
            stacks.apply(Command.RA)
            lis_started = True


@dataclass(frozen=True)
class ScoreInfo:
    """Rotation distances needed to insert one element of ``b`` into ``a``."""

    a_score: int
    a_rev_score: int
    b_score: int
    b_rev_score: int

    def min_score(self) -> int:
        """Fewest moves among the four ways of combining the rotations."""
        res = max(self.a_score, self.b_score)
        res = min(res, -min(self.a_rev_score, self.b_rev_score))
        res = min(res, self.a_score - self.b_rev_score)
        return min(res, self.b_score - self.a_rev_score)

    def rotations(self) -> tuple[int, int, int]:
        """Signed counts ``(a, b, both)`` realising :meth:`min_score`."""
        best = self.min_score()
        a, a_rev, b, b_rev = self.a_score, self.a_rev_score, self.b_score, self.b_rev_score
        if best == max(a, b):
            return (a - b, 0, b) if a > b else (0, b - a, a)
        if best == -min(a_rev, b_rev):
            return (a_rev - b_rev, 0, b_rev) if a_rev < b_rev else (0, b_rev - a_rev, a_rev)
        if best == a - b_rev:
            return (a, b_rev, 0)
        return (a_rev, b, 0)


def score_candidates(stacks: Stacks) -> list[ScoreInfo]:
    """One score per element of ``b``, in stack order."""
    values_a = list(stacks.a)
    size_a, size_b = len(values_a), len(stacks.b)
    scores = []
    for index, value in enumerate(stacks.b):
        a_score = find_insert_point(values_a, value)
        scores.append(
            ScoreInfo(
                a_score=a_score,
                a_rev_score=-((size_a - a_score) % size_a),
                b_score=index,
                b_rev_score=-((size_b - index) % size_b),
            )
        )
    return scores


def _repeat(stacks: Stacks, count: int, forward: Command, backward: Command) -> None:
    command = forward if count > 0 else backward
    for _ in range(abs(count)):
        stacks.apply(command)


def insert_all(stacks: Stacks) -> None:
    """Move every element of ``b`` back into its place in ``a``, cheapest first."""
    while len(stacks.b):
        scores = score_candidates(stacks)
        target = min(scores, key=ScoreInfo.min_score)
        rot_a, rot_b, rot_ab = target.rotations()
        _repeat(stacks, rot_ab, Command.RR, Command.RRR)
        _repeat(stacks, rot_a, Command.RA, Command.RRA)
        _repeat(stacks, rot_b, Command.RB, Command.RRB)
        stacks.apply(Command.PA)


def final_rotate(stacks: Stacks) -> None:
    """Rotate the circularly sorted ``a`` so that its smallest value is on top."""
    values = list(stacks.a)
    size = len(values)
    if not size:
        return
    index = 0
    while index < size and values[index % size] < values[(index + 1) % size]:
        index += 1
    _repeat(stacks, min_rotation(index + 1, size), Command.RA, Command.RRA)


def solve(values: Iterable[int]) -> list[Command]:
    """Instructions that sort ``values`` (distinct integers) in stack ``a``."""
    items = list(values)
    if len(items) < 2 or is_strictly_increasing(items):
        return []
    if len(items) <= 3:
        return sort_small(items)
    stacks = Stacks(items)
    separate(stacks)
    insert_all(stacks)
    final_rotate(stacks)
    return list(stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions sorting the integers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{command}\n" for command in solve(values)))
    return 0