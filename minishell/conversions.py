"""Integer parsing and formatting in the style of the C library."""

from __future__ import annotations

from .charclass import is_digit

_LEADING_SPACE = " \t\n\r\f\v"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then ASCII
    digits until the first other character. No digits gives 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {n!r}")
    return str(n)