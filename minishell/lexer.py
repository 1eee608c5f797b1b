"""Turn an input line into a flat list of tokens."""

from __future__ import annotations

import re

from .env import Shell
from .models import Token, TokenType

SYNTAX_ERROR_STATUS = 258

_BLANKS = re.compile(r"[ \t]*")
_OPERATOR = re.compile(r"<<|>>|<|>|\|")
_WORD = re.compile(r"""(?:[^ \t<>|'"]|'[^']*'|"[^"]*")*""")
_OPERATOR_TYPES = {
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPE_OUT,
    "<": TokenType.IN,
    ">": TokenType.OUT,
    "|": TokenType.PIPE,
}
_UNSUPPORTED = frozenset("&;()")
_QUOTES = frozenset("'\"")


class LexerError(Exception):
    """A syntax error found while splitting a line into tokens."""

    def __init__(self, message: str, exit_status: int = SYNTAX_ERROR_STATUS):
        super().__init__(message)
        self.exit_status = exit_status


def _fail(shell: Shell, message: str) -> LexerError:
    error = LexerError(message)
    shell.last_exit_status = error.exit_status
    return error


def lex(line: str | None, shell: Shell) -> list[Token]:
    """Split a line into word and operator tokens.

    Quotes stay inside word values. On a syntax error the shell's exit
    status is set to 258 and :class:`LexerError` is raised.
    """
    if line is None:
        return []
    tokens: list[Token] = []
    pos = _BLANKS.match(line).end()
    while pos < len(line):
        ch = line[pos]
        if ch in _UNSUPPORTED:
            raise _fail(shell, f"minishell: syntax error near unexpected token `{ch}'")
        operator = _OPERATOR.match(line, pos)
        if operator:
            tokens.append(Token(operator.group(), _OPERATOR_TYPES[operator.group()]))
            pos = operator.end()
        else:
            word = _WORD.match(line, pos)
            end = word.end()
            if end < len(line) and line[end] in _QUOTES:
                raise _fail(shell, "minishell: Syntax error: unclosed quote")
            tokens.append(Token(word.group(), TokenType.WORD))
            pos = end
        pos = _BLANKS.match(line, pos).end()
    return tokens