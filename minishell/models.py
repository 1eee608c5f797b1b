"""Data structures shared by the lexer, parser, expander and heredoc stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token produced by the lexer."""

    WORD = 0
    PIPE = 1
    IN = 2
    OUT = 3
    APPE_OUT = 4
    HEREDOC = 5


@dataclass
class Token:
    """A single lexical token."""

    value: str
    type: TokenType


class RedirType(IntEnum):
    """Kinds of redirection attached to a command."""

    REDIR_IN = 0
    REDIR_OUT = 1
    REDIR_APPEND = 2
    REDIR_HEREDOC = 3


@dataclass
class Redirection:
    """A redirection: its kind, its target file (or heredoc delimiter)."""

    type: RedirType
    file: str
    expand_heredoc_content: bool = True


@dataclass
class Command:
    """One simple command of a pipeline."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    full_path: str | None = None
    heredoc_fd: int | None = None