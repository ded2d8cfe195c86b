"""
Tab completion for registered command names.

Candidates are full replacement lines. The first token is completed against
the registry in two passes:

1. names that start with the typed token
2. names that contain the typed token anywhere (fallback)

Any arguments already typed after the first token are carried through to
every candidate, so completing never discards input.
"""

from __future__ import annotations

import logging

from shellkit.core.helpers import tokenize
from shellkit.core.registry import CommandRegistry

logger = logging.getLogger(__name__)


class Completer:
    """Computes completion candidates from a registry and a partial line."""

    def __init__(self, registry: CommandRegistry, min_substring_length: int = 0):
        """
        Args:
            registry: Registry whose command names are completed
            min_substring_length: Shortest first token for which the
                substring pass runs. 0 means always.
        """
        if min_substring_length < 0:
            raise ValueError("min_substring_length must be >= 0")
        self._registry = registry
        self.min_substring_length = min_substring_length

    def complete(self, line: str) -> list[str]:
        """Return the completion candidates for line."""
        tokens = tokenize(line)
        head = tokens[0] if tokens else ""
        rest = tokens[1:]

        # First word is already a valid command
        if head in self._registry:
            return [line + " "]

        tail = " ".join(rest)
        prefixed: list[str] = []
        remaining: list[str] = []
        for name in self._registry.names():
            if name.startswith(head):
                prefixed.append(name)
            else:
                remaining.append(name)

        candidates = [f"{name} {tail}" for name in prefixed]
        if len(head) >= self.min_substring_length:
            candidates.extend(f"{name} {tail}" for name in remaining if head in name)

        logger.debug(f"Completion for {line!r}: {len(candidates)} candidate(s)")
        return candidates

    __call__ = complete
