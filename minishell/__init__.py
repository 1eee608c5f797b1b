"""Lexer, variable expander, here-document reader and small helpers for a Bash-like shell."""

__version__ = "0.1.0"

__all__ = [
    "charclass",
    "conversions",
    "env",
    "expander",
    "heredoc",
    "lexer",
    "linereader",
    "models",
    "output",
    "printf",
    "report",
    "strings",
]