"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: str | int) -> int:
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise TypeError(f"expected a single character or an int, got {c!r}")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACE_CODES


def _convert(c: str | int, shift: int, low: str, high: str) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    return _convert(c, 32, "A", "Z")


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    return _convert(c, -32, "a", "z")