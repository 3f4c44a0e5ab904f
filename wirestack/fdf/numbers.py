"""Number and word parsing for map files, and fractional helpers for drawing."""

from __future__ import annotations

import math

from wirestack.pushswap.parsing import parse_int

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_height(text: str) -> int:
    """Parse a strict, optionally signed 32-bit decimal; raise ValueError otherwise."""
    return parse_int(text)


def parse_color(text: str) -> int:
    """Parse a colour written as ``0x`` followed by up to six hex digits."""
    if not 3 <= len(text) <= 8:
        raise ValueError(f"bad colour length: {text!r}")
    if text[0] != "0" or text[1] not in ("x", "X"):
        raise ValueError(f"colour must start with 0x: {text!r}")
    digits = text[2:]
    if not all(ch in _HEX_DIGITS for ch in digits):
        raise ValueError(f"bad colour digits: {text!r}")
    return int(digits, 16)


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def ipart(x: float) -> int:
    """Integer part of ``x``, rounding down."""
    return math.floor(x)


def fpart(x: float) -> float:
    """Fractional part of ``x``, in ``[0, 1)``."""
    return x - ipart(x)


def rfpart(x: float) -> float:
    """One minus the fractional part of ``x``."""
    return 1 - fpart(x)