"""
Line editors used by the shell to read input.

Two frontends are provided:
    1) prompt_toolkit (rich completion menu + history)
    2) readline (basic completion + history)

Both translate end-of-input and interrupts into ReadError, and only record
history when asked to, so the shell decides which lines are kept.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from shellkit.core.exceptions import ReadError

if TYPE_CHECKING:
    from shellkit.config import Settings

logger = logging.getLogger(__name__)

CompleteFn = Callable[[str], list[str]]

# Error texts reported for the two ways a read can end without a line
EOF_TEXT = "EOF"
ABORTED_TEXT = "prompt aborted"


class LineEditor(ABC):
    """
    Base interface for line editors.

    Subclasses implement prompt_line(), set_completer(), append_history()
    and _close(). close() is idempotent; the context manager form
    guarantees it runs.
    """

    def __init__(self) -> None:
        self._closed = False

    @abstractmethod
    def prompt_line(self, prompt: str) -> str:
        """Block until a line is entered. Raises ReadError on EOF or interrupt."""

    @abstractmethod
    def set_completer(self, fn: CompleteFn | None) -> None:
        """Install fn as the tab-completion callback."""

    @abstractmethod
    def append_history(self, line: str) -> None:
        """Record line in the editor history."""

    @abstractmethod
    def _close(self) -> None:
        """Release terminal state. Called at most once."""

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._close()
        logger.debug(f"Closed {type(self).__name__}")

    # Context manager helpers
    def __enter__(self) -> "LineEditor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# ===== prompt_toolkit =====

class LineCompleter(Completer):
    """Adapts a line-completion function to prompt_toolkit.

    Each candidate is a full replacement for the text before the cursor.
    """

    def __init__(self, fn: CompleteFn | None = None):
        self.fn = fn

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        if self.fn is None:
            return
        text = document.text_before_cursor
        for candidate in self.fn(text):
            yield Completion(candidate, start_position=-len(text))


class ExplicitHistory(History):
    """History that ignores accepted input and only keeps recorded lines.

    PromptSession appends every accepted line on its own; the shell only
    wants lines that matched a command.
    """

    def __init__(self, backend: History):
        super().__init__()
        self._backend = backend

    def load_history_strings(self) -> Iterable[str]:
        return self._backend.load_history_strings()

    def store_string(self, string: str) -> None:
        self._backend.store_string(string)

    def append_string(self, string: str) -> None:
        # Called by the buffer on accept; recording goes through record()
        pass

    def record(self, string: str) -> None:
        super().append_string(string)


class PromptToolkitEditor(LineEditor):
    """Rich line editor with history and a completion menu."""

    def __init__(self, history_file: str | Path | None = None) -> None:
        super().__init__()
        if history_file:
            path = Path(history_file).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            backend: History = FileHistory(str(path))
        else:
            backend = InMemoryHistory()
        self._history = ExplicitHistory(backend)
        self._completer = LineCompleter()
        self._session: Optional[PromptSession] = None

    @property
    def history(self) -> ExplicitHistory:
        return self._history

    @property
    def completer(self) -> LineCompleter:
        return self._completer

    def _get_session(self) -> PromptSession:
        # Created on first prompt so constructing the editor needs no terminal
        if self._session is None:
            self._session = PromptSession(
                history=self._history,
                completer=self._completer,
                complete_while_typing=False,
            )
        return self._session

    def prompt_line(self, prompt: str) -> str:
        if self.closed:
            raise ReadError("editor closed")
        try:
            # Signal handlers can only be installed from the main thread
            on_main = threading.current_thread() is threading.main_thread()
            return self._get_session().prompt(prompt, handle_sigint=on_main)
        except EOFError:
            raise ReadError(EOF_TEXT) from None
        except KeyboardInterrupt:
            raise ReadError(ABORTED_TEXT) from None

    def set_completer(self, fn: CompleteFn | None) -> None:
        self._completer.fn = fn

    def append_history(self, line: str) -> None:
        self._history.record(line)

    def _close(self) -> None:
        # FileHistory writes on every record; nothing to flush
        self._session = None


# ===== readline =====

class ReadlineEditor(LineEditor):
    """Line editor on top of the readline module."""

    HISTORY_LENGTH = 1000

    def __init__(self, history_file: str | Path | None = None) -> None:
        super().__init__()
        import readline

        self.readline = readline
        self._history_file = Path(history_file).expanduser() if history_file else None
        self._fn: CompleteFn | None = None
        self._matches: list[str] = []

        if self._history_file is not None:
            self._history_file.parent.mkdir(parents=True, exist_ok=True)
            if self._history_file.exists():
                try:
                    readline.read_history_file(str(self._history_file))
                except OSError as e:
                    logger.warning(f"Could not read history file {self._history_file}: {e}")
        readline.set_history_length(self.HISTORY_LENGTH)
        # History is recorded explicitly through append_history()
        readline.set_auto_history(False)

        # Complete on the whole line rather than the current word
        readline.set_completer_delims("")
        readline.set_completer(self._complete)
        readline.parse_and_bind("tab: complete")

    def _complete(self, text: str, state: int) -> str | None:
        """Return the state-th completion for text."""
        if state == 0:
            self._matches = self._fn(text) if self._fn is not None else []
        if state < len(self._matches):
            return self._matches[state]
        return None

    def prompt_line(self, prompt: str) -> str:
        if self.closed:
            raise ReadError("editor closed")
        try:
            return input(prompt)
        except EOFError:
            raise ReadError(EOF_TEXT) from None
        except KeyboardInterrupt:
            raise ReadError(ABORTED_TEXT) from None

    def set_completer(self, fn: CompleteFn | None) -> None:
        self._fn = fn

    def append_history(self, line: str) -> None:
        self.readline.add_history(line)

    def _close(self) -> None:
        self.readline.set_completer(None)
        if self._history_file is not None:
            try:
                self.readline.write_history_file(str(self._history_file))
            except OSError as e:
                logger.warning(f"Could not write history file {self._history_file}: {e}")


def make_editor(settings: "Settings") -> LineEditor:
    """Create the line editor selected by settings."""
    history_file = settings.get("history_file")
    if settings.get("simple"):
        return ReadlineEditor(history_file)
    return PromptToolkitEditor(history_file)
