"""Reading the integer arguments of push_swap and small sorting helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the program arguments are not distinct 32-bit integers."""


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal that fits in a 32-bit int, strictly."""
    if text is None:
        raise ArgumentError("missing number")
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or not all("0" <= ch <= "9" for ch in body):
        raise ArgumentError(f"not an integer: {text!r}")
    value = int(body)
    if text.startswith("-"):
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ArgumentError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument; raise ArgumentError on bad or repeated values."""
    values = [parse_int(arg) for arg in args]
    if has_duplicates(values):
        raise ArgumentError("duplicate values")
    return values


def is_strictly_increasing(values: Sequence[int]) -> bool:
    """True when every value is smaller than the next."""
    return all(x < y for x, y in zip(values, values[1:]))


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value appears more than once."""
    ordered = quick_sort(values)
    return any(x == y for x, y in zip(ordered, ordered[1:]))


def _partition(array: list[int], left: int, right: int) -> int:
    pivot = array[left]
    i, j = left, right + 1
    while i < j:
        i += 1
        while array[i] < pivot and i != right:
            i += 1
        j -= 1
        while pivot < array[j] and j != left:
            j -= 1
        if i >= j:
            break
        array[i], array[j] = array[j], array[i]
    array[left], array[j] = array[j], array[left]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order."""
    array = list(values)
    pending = [(0, len(array) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            q = _partition(array, left, right)
            pending.append((left, q - 1))
            pending.append((q + 1, right))
    return array


def quick_select(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (from 0) without changing ``values``."""
    array = list(values)
    if not 0 <= k < len(array):
        raise IndexError("selection index out of range")
    left, right = 0, len(array) - 1
    while left != right:
        pivot_index = _partition(array, left, right)
        if k == pivot_index:
            return array[k]
        if k < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
    return array[left]