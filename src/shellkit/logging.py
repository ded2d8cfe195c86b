"""Shell logging configuration.

Provides optional file logging for a shell session. All shellkit modules
log under the "shellkit" logger; this module attaches a single file
handler to it for the lifetime of a session.
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

LOGGER_NAME = "shellkit"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None
_log_path: Optional[Path] = None


def configure_file_logging(
    path: str | Path,
    level: int = logging.DEBUG,
) -> Path:
    """Configure file logging for a shell session.

    Replaces any handler installed by an earlier call.

    Args:
        path: Log file to append to (parent directories are created)
        level: Logging level for file output (default DEBUG)

    Returns:
        Path to the log file
    """
    global _file_handler, _log_path

    log_path = Path(path).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Remove existing handler if any
    close_file_logging()

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    shell_logger = logging.getLogger(LOGGER_NAME)
    shell_logger.addHandler(_file_handler)
    shell_logger.setLevel(min(shell_logger.level or logging.DEBUG, level))

    _log_path = log_path
    shell_logger.info("=== Session started ===")

    return log_path


def close_file_logging() -> None:
    """Flush and detach the session's file handler, if one is installed."""
    global _file_handler, _log_path

    if _file_handler is not None:
        shell_logger = logging.getLogger(LOGGER_NAME)
        shell_logger.info("=== Session ended ===")

        shell_logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
        _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Get the current log file path, or None if file logging is off."""
    return _log_path


def log_exception(error: BaseException, context: str = "") -> str:
    """Log an exception with its traceback and return a one-line summary.

    Args:
        error: The exception to log
        context: What was happening when it was raised

    Returns:
        Short message suitable for display
    """
    logger = logging.getLogger(LOGGER_NAME)

    error_type = type(error).__name__
    summary = f"{context}: {error}" if context else f"{error_type}: {error}"

    tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    logger.error(f"{context}\n{error_type}: {error}\n\nTraceback:\n{tb_str}")

    return summary
