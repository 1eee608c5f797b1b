"""Variable expansion and quote removal for parsed commands."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .env import Shell
from .models import Command, RedirType

_PIECE = re.compile(
    r"""
    (?P<quote>['"])
    | \$\?
    | \$[0-9]
    | \$(?P<name>[A-Za-z_][A-Za-z0-9_]*)
    | \$
    | [^'"$]+
    """,
    re.VERBOSE,
)


def _expand_dollar(piece: str, name: str | None, shell: Shell) -> str:
    if piece == "$?":
        return shell.get_env_value("?")
    if name is not None:
        return shell.get_env_value(name)
    if len(piece) == 2:
        # "$" followed by a digit expands to nothing.
        return ""
    return piece


def expand_string(text: str | None, shell: Shell) -> str:
    """Expand ``$NAME``, ``$?`` and ``$<digit>`` and remove quote characters.

    Nothing is expanded inside single quotes. Every quote character is
    dropped from the result.
    """
    if text is None:
        return ""
    quote: str | None = None
    parts: list[str] = []
    for match in _PIECE.finditer(text):
        piece = match.group()
        if match.group("quote"):
            if quote is None:
                quote = piece
            elif quote == piece:
                quote = None
            continue
        if piece.startswith("$") and quote != "'":
            parts.append(_expand_dollar(piece, match.group("name"), shell))
        else:
            parts.append(piece)
    return "".join(parts)


def expand_variables(commands: Iterable[Command] | None, shell: Shell) -> None:
    """Expand every argument and redirection target in place.

    Heredoc delimiters are left untouched.
    """
    for command in commands or ():
        command.args = [expand_string(arg, shell) for arg in command.args]
        for redirection in command.redirections:
            if redirection.type != RedirType.REDIR_HEREDOC:
                redirection.file = expand_string(redirection.file, shell)