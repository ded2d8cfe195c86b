"""
Helper functions for the command shell.
"""

from __future__ import annotations

import re

from shellkit.core.exceptions import InvalidNameError

_WHITESPACE = re.compile(r"\s")


def tokenize(line: str) -> list[str]:
    """Split a command line on runs of whitespace.

    Leading and trailing whitespace is dropped, so an empty or blank line
    yields an empty list.
    """
    return line.split()


def _validate_name(name: str) -> str:
    """Return name unchanged, or raise InvalidNameError."""
    if not name:
        raise InvalidNameError("command name can not be empty")
    if _WHITESPACE.search(name):
        raise InvalidNameError(f"command name can not contain white spaces: {name!r}")
    return name
