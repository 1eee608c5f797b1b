"""A small formatted-output facility with a fixed set of conversions.

Supported conversions: ``%c %s %d %i %u %p %x %X %%``. Any other
character after ``%`` is written as is; a lone ``%`` at the very end of
the format is dropped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator

DECIMAL_DIGITS = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"
POINTER_PREFIX = "0x"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def to_base(number: int, digits: str) -> str:
    """Render a non-negative integer using ``digits`` as the digit alphabet."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {number!r}")
    if number < 0:
        raise ValueError("number must not be negative")
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    out: list[str] = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {value!r}")
    return value


def _as_int32(value: object) -> int:
    n = _as_int(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _as_uint32(value: object) -> int:
    return _as_int(value) & _UINT_MASK


def _format_char(value: object) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(_as_int(value) & 0xFF)


def _format_string(value: object) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"expected a str or None, got {value!r}")
    return value


def _format_int(value: object) -> str:
    n = _as_int32(value)
    if n < 0:
        return "-" + to_base(-n, DECIMAL_DIGITS)
    return to_base(n, DECIMAL_DIGITS)


def _format_pointer(value: object) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return POINTER_PREFIX + to_base(address, HEX_LOWER)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_int,
    "i": _format_int,
    "u": lambda value: to_base(_as_uint32(value), DECIMAL_DIGITS),
    "p": _format_pointer,
    "x": lambda value: to_base(_as_uint32(value), HEX_LOWER),
    "X": lambda value: to_base(_as_uint32(value), HEX_UPPER),
}


def _next_arg(args: Iterator[object], spec: str) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str | None, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    if fmt is None:
        return ""
    remaining = iter(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            out.append(spec)
        else:
            out.append(convert(_next_arg(remaining, spec)))
    return "".join(out)


def printf(fmt: str | None, *args: object) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8"))