"""
Exception classes for the command shell.
"""


class ShellError(Exception):
    """Base exception for shell-related errors."""


class InvalidNameError(ShellError, ValueError):
    """Command name is empty or contains whitespace."""


class ReadError(ShellError):
    """The line editor could not deliver a line (EOF, interrupt, closed stream)."""


class ShellStateError(ShellError):
    """Operation not allowed in the shell's current loop state."""
