"""Write characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os


def _write(fd: int, text: str) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def put_char(c: str, fd: int) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    _write(fd, c)


def put_str(text: str, fd: int) -> None:
    """Write a string."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {text!r}")
    _write(fd, text)


def put_endl(text: str, fd: int) -> None:
    """Write a string followed by a newline."""
    put_str(text, fd)
    _write(fd, "\n")


def put_nbr(n: int, fd: int) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {n!r}")
    _write(fd, str(n))