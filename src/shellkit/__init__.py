"""
shellkit - Embeddable interactive command shell

Register named commands with callbacks, then run a read-dispatch-print
loop with tab completion and history.

Example usage:
    from shellkit import Shell

    shell = Shell("Welcome. Type 'help' to get a list of all available commands")
    shell.add_command("help", "prints this help message", shell.render_help)
    shell.add_command("exit", "exits the input loop", shell.exit)

    @shell.command("greet", "says hello")
    def greet(args):
        return "hello " + " ".join(args)

    shell.set_default(lambda args: "unknown command: " + " ".join(args))
    shell.run("> ")
"""

__version__ = "0.1.0"

from shellkit.config import DEFAULTS, Settings
from shellkit.core import (
    Callback,
    Command,
    CommandRegistry,
    Completer,
    InvalidNameError,
    ReadError,
    ShellError,
    ShellStateError,
    tokenize,
)
from shellkit.editor import (
    LineEditor,
    PromptToolkitEditor,
    ReadlineEditor,
    make_editor,
)
from shellkit.shell import ExitSignal, LoopState, Shell

__all__ = [
    # Version
    "__version__",
    # Shell
    "Shell",
    "LoopState",
    "ExitSignal",
    # Core
    "CommandRegistry",
    "Command",
    "Callback",
    "Completer",
    "tokenize",
    # Editors
    "LineEditor",
    "PromptToolkitEditor",
    "ReadlineEditor",
    "make_editor",
    # Settings
    "Settings",
    "DEFAULTS",
    # Exceptions
    "ShellError",
    "InvalidNameError",
    "ReadError",
    "ShellStateError",
]
