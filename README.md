# wirestack

A two-stack sorting solver with a matching checker, plus a few helpers for
reading height-map values and working with 24-bit RGB colours.

## Installation

```
pip install .
```

Python 3.10 or newer is required. There are no runtime dependencies.

## Sorting with two stacks

```
wirestack-push-swap 3 1 2 5 4
```

This prints, one per line, a sequence of stack operations (`sa`, `sb`, `ss`,
`pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`) that leaves the numbers
sorted in ascending order in stack `a`, with stack `b` empty.

Each argument must be an integer in the 32-bit signed range, written as an
optional `+` or `-` followed by digits and nothing else. Malformed numbers or
duplicates make the program print `Error` to standard error and exit with
status 1. Input that is already sorted, or has fewer than two numbers,
produces no output. Two or three numbers are sorted with a fixed short
sequence; larger inputs keep a longest circular increasing run in `a`, move
the rest to `b`, then insert each back at the cheapest rotation cost.

To verify a sequence, give the same numbers to the checker and feed it the
operations on standard input:

```
wirestack-push-swap 3 1 2 5 4 | wirestack-checker 3 1 2 5 4
```

It prints `OK` when `a` ends up strictly increasing from the top and `b` is
empty, and `KO` otherwise. Each operation must be on its own line ending in a
newline; anything else prints `Error` to standard error and exits with
status 1. With no arguments the checker does nothing and exits with status 0.

### From Python

```python
from wirestack.pushswap.solver import solve
from wirestack.pushswap.checker import check

commands = solve([3, 1, 2, 5, 4])
assert check([3, 1, 2, 5, 4], commands)
```

* `wirestack.pushswap.stacks` – `Command` (the eleven operations), `Stack`
  and `Stacks`, whose `apply` carries out a command and records it in
  `history`, and whose `is_solved` reports the sorted state.
* `wirestack.pushswap.parsing` – `parse_int`, `parse_arguments` (raising
  `ArgumentError`), `has_duplicates`, `is_strictly_increasing`, `quick_sort`
  and `quick_select`.
* `wirestack.pushswap.lis` – `lis_length`, `lis_mask`, `best_rotation` and
  `circular_lis`.
* `wirestack.pushswap.solver` – `solve`, `sort_small` and the steps it is
  built from (`separate`, `insert_all`, `final_rotate`, `ScoreInfo`).
* `wirestack.pushswap.checker` – `parse_command` (raising `CommandError`),
  `read_commands`, `load_stack` and `check`.
* `wirestack.lines.iter_lines` – yields the lines of a text or binary stream,
  keeping newlines, or dropping them and stopping at the first empty line.

## Height-map helpers

* `wirestack.fdf.numbers` – `parse_height` (a strict 32-bit decimal),
  `parse_color` (`0x` followed by one to six hex digits), `split_words`
  (splits on a separator and drops empty words), and `ipart`, `fpart`,
  `rfpart` for the integer and fractional parts of a float.
* `wirestack.fdf.color` – `create_rgb`, `get_r`, `get_g`, `get_b`,
  `add_shade` (scales every channel, clamped to 0–255), `get_opposite` and
  `interpolate_color` (linear blend between two colours).

## What is not included

The package has no height-map viewer: it does not load map files, project or
rotate them, draw lines or open a window, and it installs no command for
that. Only the number and colour helpers above are provided.

## Running the tests

```
pip install .[test]
pytest
```