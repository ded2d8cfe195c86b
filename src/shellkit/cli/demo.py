#!/usr/bin/env python3
"""
CLI entry point for a demonstration shell (shellkit-demo command).

Registers a handful of commands and echoes anything it does not recognize.
"""

from __future__ import annotations

import argparse

from shellkit.config import DEFAULTS, Settings
from shellkit.editor import LineEditor
from shellkit.shell import Shell

GREETING = "Welcome to this dummy CLI. Type 'help' to get a list of all available commands"
DEFAULT_PROMPT = "dummyprompt? "


def build_shell(settings: Settings | None = None, editor: LineEditor | None = None) -> Shell:
    """Create the demo shell with its commands registered."""
    shell = Shell(GREETING, editor=editor, settings=settings)

    shell.add_command("help", "prints this help message", shell.render_help)
    shell.add_command("exit", "exits the input loop", shell.exit)
    # A long name to show the help listing stays aligned
    shell.add_command(
        "kapitänsmützenabzeichen",
        "just an example of a long cmd name not breaking the help formatting",
        shell.exit,
    )

    shell.set_default(lambda args: " ".join(args))
    return shell


def main(argv: list[str] | None = None) -> None:
    """Run the demo shell."""
    parser = argparse.ArgumentParser(
        description="Demonstration shell built with shellkit",
    )
    parser.add_argument(
        "--prompt", default=DEFAULT_PROMPT, help=f"Prompt text (default: {DEFAULT_PROMPT!r})"
    )
    parser.add_argument(
        "--simple", action="store_true", help="Use the readline editor (no prompt_toolkit)"
    )
    parser.add_argument(
        "--no-threads", action="store_true", help="Run the loop on the calling thread"
    )
    parser.add_argument(
        "--min-substring", type=int, metavar="N",
        default=DEFAULTS["min_substring_length"],
        help="Shortest input for substring completion (default: 0)",
    )
    parser.add_argument("--history-file", metavar="PATH", help="Persist editor history here")
    parser.add_argument("--log-file", metavar="PATH", help="Write debug logs here")
    args = parser.parse_args(argv)

    if args.min_substring < 0:
        parser.error("--min-substring must be >= 0")

    settings = Settings(
        simple=args.simple,
        threaded=not args.no_threads,
        min_substring_length=args.min_substring,
        history_file=args.history_file,
        log_file=args.log_file,
    )
    shell = build_shell(settings)
    shell.run(args.prompt)

    print("this part of the code is only reached when the cli loop returns")


if __name__ == "__main__":
    main()
