"""
Core module for the shellkit package.

Provides the command registry, the completion engine and related models.
"""

from shellkit.core.completion import Completer
from shellkit.core.datamodels import Callback, Command
from shellkit.core.exceptions import (
    InvalidNameError,
    ReadError,
    ShellError,
    ShellStateError,
)
from shellkit.core.helpers import tokenize
from shellkit.core.registry import CommandRegistry

__all__ = [
    # Registry
    "CommandRegistry",
    # Completion
    "Completer",
    # Models
    "Command",
    "Callback",
    # Exceptions
    "ShellError",
    "InvalidNameError",
    "ReadError",
    "ShellStateError",
    # Helpers
    "tokenize",
]
