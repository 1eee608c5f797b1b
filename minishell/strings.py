"""String helpers with C library semantics, expressed on Python strings.

Functions that locate something return an index into the text, or ``None``
where nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: str | int) -> str:
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise TypeError(f"expected a single character or an int, got {c!r}")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {value!r}")
    return value


def split(text: str, sep: str | int) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    _require_str(text, "text")
    return [word for word in text.split(_char(sep)) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(n, 0))
    return None if index < 0 else index


def _compare(pairs) -> int:
    for ca, cb in pairs:
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            break
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the ordering."""
    _require_str(a, "a")
    _require_str(b, "b")
    if n <= 0:
        return 0
    return _compare(islice(zip_longest(a, b, fillvalue=_NUL), n))


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the sign gives the ordering."""
    _require_str(a, "a")
    _require_str(b, "b")
    return _compare(zip_longest(a, b, fillvalue=_NUL))


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _require_str(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strchr(text: str, char: str | int) -> int | None:
    """Index of the first occurrence of ``char``.

    Searching for NUL finds the end of the text.
    """
    _require_str(text, "text")
    target = _char(char)
    index = text.find(target)
    if index >= 0:
        return index
    return len(text) if target == _NUL else None


def strrchr(text: str, char: str | int) -> int | None:
    """Index of the last occurrence of ``char``.

    Searching for NUL finds the end of the text.
    """
    _require_str(text, "text")
    target = _char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to each character."""
    _require_str(text, "text")
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))