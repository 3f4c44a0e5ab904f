"""Reading a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr


def iter_lines(stream: IO[AnyStr], keep_newline: bool = True) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, text or binary.

    With ``keep_newline`` each line keeps its trailing newline and reading
    stops at end of file.  Without it the newline is dropped, and an empty
    line counts as the end of the input, as it does for the map reader.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        if not keep_newline:
            newline = b"\n" if isinstance(line, bytes) else "\n"
            if line.endswith(newline):
                line = line[:-1]
            if not line:
                return
        yield line