"""
Command registry for the shell.

Commands are registered with a name, help text, and a callback that takes
the remaining tokens of the input line and returns the text to print.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from shellkit.core.datamodels import Callback, Command
from shellkit.core.helpers import _validate_name

logger = logging.getLogger(__name__)


def _echo(args: list[str]) -> str:
    """Fallback used until a default callback is set."""
    return " ".join(args)


class CommandRegistry:
    """Registry for shell commands."""

    def __init__(self):
        self._commands: dict[str, Command] = {}
        self._default: Command = Command(name="", help="", callback=_echo)
        self._longest: int = 0

    def add_command(self, name: str, help: str, callback: Callback) -> Command:
        """Register a command, replacing any command with the same name.

        Args:
            name: Command name, the first token of a matching input line
            help: One-line description for the help listing; empty hides it
            callback: Called with the remaining tokens, returns the output text

        Returns:
            The registered Command

        Raises:
            InvalidNameError: If name is empty or contains white space
        """
        _validate_name(name)
        entry = Command(name=name, help=help, callback=callback)
        self._commands[name] = entry
        # Needed for aligning the help listing
        if self._longest < len(name):
            self._longest = len(name)
        logger.debug(f"Registered command: {name}")
        return entry

    def command(self, name: str, help: str = "") -> Callable[[Callback], Callback]:
        """Decorator to register a command.

        Example:
            @registry.command("greet", "Say hello")
            def greet(args):
                return "hello " + " ".join(args)
        """
        def decorator(func: Callback) -> Callback:
            self.add_command(name, help, func)
            return func
        return decorator

    def set_default(self, callback: Callback) -> None:
        """Set the callback for lines whose first token matches no command.

        The default callback receives every token, including the unmatched
        first one.
        """
        self._default = Command(name="", help="", callback=callback)

    @property
    def default(self) -> Command:
        return self._default

    @property
    def longest_name(self) -> int:
        """Length of the longest name registered so far."""
        return self._longest

    def lookup(self, name: str) -> Command | None:
        """Get a command by exact name."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        return list(self._commands)

    def render_help(self) -> str:
        """Build the help listing for all commands that have help text.

        Names are right-aligned to the longest registered name.
        """
        lines = []
        for name in sorted(self._commands):
            entry = self._commands[name]
            if entry.hidden:
                continue
            lines.append(f"{name:>{self._longest}}  -  {entry.help}")
        return "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
