"""
Shared fixtures for shellkit tests.
"""

import pytest

from shellkit.core import ReadError
from shellkit.editor import LineEditor


class ScriptedEditor(LineEditor):
    """Line editor that replays a fixed list of lines, then reports EOF."""

    def __init__(self, lines=()):
        super().__init__()
        self.lines = list(lines)
        self.prompts = []
        self.history = []
        self.completer = None
        self.close_count = 0

    def prompt_line(self, prompt):
        self.prompts.append(prompt)
        if self.closed:
            raise ReadError("editor closed")
        if not self.lines:
            raise ReadError("EOF")
        return self.lines.pop(0)

    def set_completer(self, fn):
        self.completer = fn

    def append_history(self, line):
        self.history.append(line)

    def _close(self):
        self.close_count += 1


@pytest.fixture
def scripted_editor():
    """Factory for scripted editors."""
    return ScriptedEditor


@pytest.fixture
def output():
    """Collects everything the shell prints."""
    return []
