"""Collect heredoc input for commands before execution."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterable

from .env import Shell
from .expander import expand_string
from .models import Command, Redirection, RedirType

HEREDOC_PROMPT = ">"
INTERRUPTED_STATUS = 130
EOF_STATUS = 1


class HeredocAborted(Exception):
    """Heredoc input ended by an interrupt or by end of input."""

    def __init__(self, message: str, exit_status: int):
        super().__init__(message)
        self.exit_status = exit_status


def _default_read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _last_heredoc(command: Command) -> Redirection | None:
    heredocs = [r for r in command.redirections if r.type == RedirType.REDIR_HEREDOC]
    return heredocs[-1] if heredocs else None


def _collect(
    heredoc: Redirection, shell: Shell, read_line: Callable[[str], str | None]
) -> str:
    lines: list[str] = []
    while True:
        try:
            line = read_line(HEREDOC_PROMPT)
        except KeyboardInterrupt:
            shell.last_exit_status = INTERRUPTED_STATUS
            raise HeredocAborted("heredoc interrupted", INTERRUPTED_STATUS) from None
        if line is None:
            shell.last_exit_status = EOF_STATUS
            raise HeredocAborted("heredoc ended by end of input", EOF_STATUS)
        if line == heredoc.file:
            return "".join(lines)
        if heredoc.expand_heredoc_content:
            line = expand_string(line, shell)
        lines.append(line + "\n")


def _readable_fd(content: str) -> int:
    with tempfile.TemporaryFile() as handle:
        handle.write(content.encode("utf-8"))
        handle.flush()
        handle.seek(0)
        return os.dup(handle.fileno())


def process_heredocs(
    commands: Iterable[Command] | None,
    shell: Shell,
    read_line: Callable[[str], str | None] | None = None,
) -> None:
    """Read the body of the last heredoc of each command.

    ``read_line`` is called with the prompt and returns a line, or ``None``
    at end of input; a ``KeyboardInterrupt`` from it aborts. The collected
    text is made available through ``command.heredoc_fd``, a readable file
    descriptor. Raises :class:`HeredocAborted` on interrupt or end of input.
    """
    reader = read_line or _default_read_line
    for command in commands or ():
        heredoc = _last_heredoc(command)
        if heredoc is None:
            continue
        command.heredoc_fd = _readable_fd(_collect(heredoc, shell, reader))