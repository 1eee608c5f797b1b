"""Shell state: the environment copy and the last exit status."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .charclass import is_space


@dataclass
class Shell:
    """Mutable shell state holding its own copy of the environment."""

    envp: list[str] = field(default_factory=list)
    last_exit_status: int = 0
    should_exit: bool = False

    @classmethod
    def from_environment(
        cls, envp: Mapping[str, str] | Iterable[str] | None = None
    ) -> Shell:
        """Create a shell from ``KEY=VALUE`` strings or a mapping.

        With no argument the process environment is used.
        """
        if envp is None:
            envp = os.environ
        if isinstance(envp, Mapping):
            entries = [f"{key}={value}" for key, value in envp.items()]
        else:
            entries = list(envp)
        return cls(envp=entries)

    def _find(self, key: str) -> int | None:
        prefix = f"{key}="
        return next(
            (i for i, entry in enumerate(self.envp) if entry.startswith(prefix)),
            None,
        )

    def get_env_value(self, name: str | None) -> str:
        """Return the value of a variable, ``""`` if unset.

        The name ``?`` yields the last exit status.
        """
        if name is None:
            return ""
        if name == "?":
            return str(self.last_exit_status)
        index = self._find(name)
        if index is None:
            return ""
        return self.envp[index][len(name) + 1 :]

    def set_env_var(self, key: str, value: str) -> None:
        """Set a variable, replacing it in place or appending it at the end."""
        entry = f"{key}={value}"
        index = self._find(key)
        if index is None:
            self.envp.append(entry)
        else:
            self.envp[index] = entry


def is_whitespace(text: str | None) -> bool:
    """True if the text is None, empty or made only of whitespace."""
    if text is None:
        return True
    return all(is_space(ch) for ch in text)