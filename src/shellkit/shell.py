"""
Interactive command shell (Read-Eval-Print Loop).

A Shell owns a command registry, a completer bound to it, and a line
editor. run() prompts for lines, dispatches each to the matching command
(or the default callback), prints the result, and returns once exit() has
been called or the editor fails to deliver a line.

Two scheduling models are supported:

    threaded (default)
        The loop body runs on its own thread while run() blocks on an
        ExitSignal. exit(), called from a command on the loop thread,
        publishes the terminal message and hands control back to run().

    single-context
        The loop body runs on the caller's thread; exit() flips the loop
        state and the loop stops on its next check.

Example:
    shell = Shell("Type 'help' for a list of commands")
    shell.add_command("help", "prints this help message", shell.render_help)
    shell.add_command("exit", "exits the input loop", shell.exit)
    shell.set_default(lambda args: "unknown command: " + " ".join(args))
    message = shell.run("> ")
"""

from __future__ import annotations

import enum
import json
import logging
import threading
from typing import Callable, Optional, Sequence

from shellkit.config import Settings
from shellkit.core import (
    Callback,
    Command,
    CommandRegistry,
    Completer,
    ReadError,
    ShellStateError,
    tokenize,
)
from shellkit.editor import ABORTED_TEXT, LineEditor, make_editor
from shellkit.logging import close_file_logging, configure_file_logging, log_exception

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    """Lifecycle of a Shell: IDLE -> RUNNING -> STOPPED."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class ExitSignal:
    """One-shot rendezvous between the loop thread and the caller of run().

    Carries either the terminal message or an exception raised on the loop
    thread. Only the first publish() or fail() counts.
    """

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._message: Optional[str] = None
        self._error: Optional[BaseException] = None

    def publish(self, message: str) -> bool:
        """Deliver the terminal message. Returns False if already signalled."""
        with self._lock:
            if self._event.is_set():
                return False
            self._message = message
            self._event.set()
        return True

    def fail(self, error: BaseException) -> bool:
        """Deliver an exception instead of a message."""
        with self._lock:
            if self._event.is_set():
                return False
            self._error = error
            self._event.set()
        return True

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> str:
        """Block until signalled; return the message or raise the error.

        Raises:
            TimeoutError: If timeout elapses first
        """
        if not self._event.wait(timeout):
            raise TimeoutError("exit signal not received")
        if self._error is not None:
            raise self._error
        return self._message or ""


class Shell:
    """Embeddable command shell with tab completion and history."""

    def __init__(
        self,
        greeting: str = "",
        editor: LineEditor | None = None,
        settings: Settings | None = None,
        output: Callable[[str], object] = print,
    ):
        """
        Args:
            greeting: Printed once before the first prompt (skipped if empty)
            editor: Line editor to read from; built from settings if None
            settings: Session settings (defaults for every unset field)
            output: Called with each callback's result
        """
        self._settings = settings or Settings()
        self._greeting = greeting
        self._output = output
        self._registry = CommandRegistry()
        self._completer = Completer(
            self._registry,
            min_substring_length=self._settings.get("min_substring_length"),
        )
        self._editor = editor if editor is not None else make_editor(self._settings)
        self._editor.set_completer(self._completer)

        self._threaded = bool(self._settings.get("threaded"))
        self._record_history = bool(self._settings.get("history"))

        self._lock = threading.Lock()
        self._state = LoopState.IDLE
        self._message: Optional[str] = None
        self._signal = ExitSignal()
        self._worker: Optional[threading.Thread] = None
        self._stopped_on_worker = False
        self._loop_error: Optional[BaseException] = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def message(self) -> Optional[str]:
        """Terminal message of the session, set once the shell has stopped."""
        return self._message

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def completer(self) -> Completer:
        return self._completer

    @property
    def editor(self) -> LineEditor:
        return self._editor

    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_command(self, name: str, help: str, callback: Callback) -> Command:
        """Register a command. Raises InvalidNameError for bad names."""
        return self._registry.add_command(name, help, callback)

    def command(self, name: str, help: str = "") -> Callable[[Callback], Callback]:
        """Decorator form of add_command()."""
        return self._registry.command(name, help)

    def set_default(self, callback: Callback) -> None:
        """Set the callback for lines that match no command."""
        self._registry.set_default(callback)

    # ------------------------------------------------------------------
    # Built-in callbacks
    # ------------------------------------------------------------------

    def render_help(self, args: Sequence[str] = ()) -> str:
        """Help listing of all commands with help text; args are ignored."""
        return self._registry.render_help()

    def exit(self, args: Sequence[str] = ()) -> str:
        """Stop the loop and return args joined by single spaces.

        Safe to call more than once and from any thread; only the first call
        closes the editor and sets the session's terminal message.
        """
        message = " ".join(args)
        self._shutdown(message)
        return message

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def dispatch(self, line: str) -> str:
        """Run the command named by the first token of line and return its output."""
        tokens = tokenize(line)
        entry = self._registry.lookup(tokens[0]) if tokens else None
        if entry is None:
            logger.debug(f"No command for {line!r}, using default")
            return self._registry.default(tokens)

        if self._record_history:
            self._editor.append_history(line)
        logger.debug(f"Dispatching {entry.name} with {len(tokens) - 1} arg(s)")
        return entry(tokens[1:])

    def run(self, prompt: str) -> str:
        """Prompt, dispatch and print until the session ends.

        In threaded mode, a KeyboardInterrupt delivered to the caller while
        it waits ends the session with 'error: "prompt aborted"'. The loop
        thread is a daemon and may still be blocked in the editor's read
        when run() returns; it exits after that read completes.

        Returns:
            The terminal message passed to exit()

        Raises:
            ShellStateError: If the shell is already running or stopped
        """
        with self._lock:
            if self._state is not LoopState.IDLE:
                raise ShellStateError(f"cannot run a shell that is {self._state.value}")
            self._state = LoopState.RUNNING

        log_file = self._settings.get("log_file")
        if log_file:
            configure_file_logging(log_file)
        try:
            if self._greeting:
                self._output(self._greeting)
            if self._threaded:
                return self._run_threaded(prompt)
            self._loop(prompt)
            return self._message or ""
        finally:
            if log_file:
                close_file_logging()

    def _run_threaded(self, prompt: str) -> str:
        self._worker = threading.Thread(
            target=self._serve,
            args=(prompt,),
            name="shellkit-loop",
            daemon=True,
        )
        self._worker.start()
        try:
            message = self._signal.wait()
        except KeyboardInterrupt:
            # The loop thread may be blocked in a read that will never return
            logger.info("Interrupted while waiting for the loop to exit")
            self._shutdown(f"error: {json.dumps(ABORTED_TEXT)}")
            return self._message or ""

        # Let the loop thread print the output of the command that exited
        if self._stopped_on_worker:
            self._worker.join()
        if self._loop_error is not None:
            raise self._loop_error
        return message

    def _serve(self, prompt: str) -> None:
        """Loop thread entry point; always signals the waiting caller."""
        try:
            self._loop(prompt)
        except BaseException as e:
            log_exception(e, "Shell loop failed")
            # exit() may already have published; run() re-raises after the join
            self._loop_error = e
            self._signal.fail(e)
        else:
            self._signal.publish(self._message or "")

    def _loop(self, prompt: str) -> None:
        try:
            while self._state is LoopState.RUNNING:
                try:
                    line = self._editor.prompt_line(prompt)
                except ReadError as e:
                    logger.info(f"Read failed, ending session: {e}")
                    self.exit(["error:", json.dumps(str(e), ensure_ascii=False)])
                    continue
                self._output(self.dispatch(line))
        finally:
            # Covers exceptions escaping a callback
            self._shutdown(None)

    def _shutdown(self, message: Optional[str]) -> bool:
        """Close the editor and stop the loop. Returns False if already stopped."""
        with self._lock:
            if self._state is LoopState.STOPPED:
                return False
            self._editor.close()
            self._state = LoopState.STOPPED
            self._message = message
            self._stopped_on_worker = threading.current_thread() is self._worker
        logger.debug(f"Shell stopped: {message!r}")

        if self._threaded and message is not None:
            self._signal.publish(message)
        return True
