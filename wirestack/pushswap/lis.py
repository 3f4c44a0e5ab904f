"""Longest strictly increasing subsequences, linear and circular."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

_INF = 2**31


def lis_length(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence of ``values``."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def best_rotation(values: Sequence[int]) -> int:
    """First rotation offset whose linear LIS is the longest."""
    items = list(values)
    best_index, best_length = 0, 0
    for offset in range(len(items)):
        length = lis_length(items[offset:] + items[:offset])
        if length > best_length:
            best_index, best_length = offset, length
    return best_index


def _dp_table(values: Sequence[int]) -> list[list[int]]:
    """Row ``i`` holds the smallest tail of each increasing length within ``values[:i+1]``."""
    size = len(values)
    rows: list[list[int]] = []
    previous: list[int] | None = None
    for i, value in enumerate(values):
        row = [_INF] * size
        for j in range(i + 1):
            if previous is None:
                row[j] = value
            elif j == 0 or value > previous[j - 1]:
                row[j] = min(previous[j], value)
            else:
                row[j] = previous[j]
        rows.append(row)
        previous = row
    return rows


def lis_mask(values: Sequence[int]) -> list[bool]:
    """Flags marking one longest strictly increasing subsequence of ``values``."""
    size = len(values)
    if not size:
        return []
    rows = _dp_table(values)
    length = sum(1 for tail in rows[-1] if tail != _INF)
    mask = [False] * size
    i, j = size - 1, length - 1
    while i >= 0 and j >= 0:
        if i == 0 or rows[i - 1][j] != rows[i][j]:
            mask[i] = True
            j -= 1
        i -= 1
    return mask


def circular_lis(values: Sequence[int]) -> list[bool]:
    """Flags, aligned with ``values``, of a longest increasing run read circularly."""
    items = list(values)
    if not items:
        return []
    start = best_rotation(items)
    rotated_mask = lis_mask(items[start:] + items[:start])
    size = len(items)
    mask = [False] * size
    for offset, flag in enumerate(rotated_mask):
        mask[(start + offset) % size] = flag
    return mask