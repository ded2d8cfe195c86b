"""
Data models for registered commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# A callback receives the tokenized arguments and returns the text to print.
Callback = Callable[[list[str]], str]


@dataclass(frozen=True)
class Command:
    """Entry for a registered command."""

    name: str
    help: str
    callback: Callback

    def __call__(self, args: list[str]) -> str:
        return self.callback(args)

    @property
    def hidden(self) -> bool:
        """True when the command is left out of the help listing."""
        return not self.help
