"""Human-readable dump of a parsed command list."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Command


def format_commands(commands: Sequence[Command] | None) -> str:
    """Render commands with their arguments and redirections."""
    if not commands:
        return "-> Parser returned NULL\n"
    lines = ["", "--- ✅ Final Command Structure ---"]
    for number, command in enumerate(commands, start=1):
        lines.append(f"  [Command #{number}]")
        args = "".join(f'["{arg}"] ' for arg in command.args)
        lines.append(f"    Args: {args}")
        if command.redirections:
            redirs = "".join(
                f'(Type: {int(r.type)}, File: "{r.file}") '
                for r in command.redirections
            )
        else:
            redirs = "None"
        lines.append(f"    Redirections: {redirs}")
    return "\n".join(lines) + "\n"