"""Read a file descriptor line by line, keeping unread data between calls."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42
MAX_FD = 1024

_NEWLINE = b"\n"


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines keep their trailing newline; the final line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` at end of input or on error.

        If the descriptor cannot be read at all, unread data is discarded.
        """
        try:
            os.read(self.fd, 0)
        except OSError:
            self._stash = b""
            return None
        while True:
            index = self._stash.find(_NEWLINE)
            if index >= 0:
                line, self._stash = (
                    self._stash[: index + 1],
                    self._stash[index + 1 :],
                )
                return _decode(line)
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                chunk = b""
            if not chunk:
                line, self._stash = self._stash, b""
                return _decode(line) if line else None
            self._stash += chunk

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, keeping a separate buffer per descriptor.

    Returns ``None`` at end of input, for a descriptor outside
    ``0..MAX_FD-1``, or when the descriptor cannot be read.
    """
    if fd < 0 or fd >= MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.read_line()
    if line is None:
        _readers.pop(fd, None)
    return line