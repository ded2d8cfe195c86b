"""
Settings for a shell session.

Settings are built in-process by the embedding program; nothing is read
from or written to disk.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


# Default values - single source of truth
DEFAULTS = {
    "threaded": True,
    "history": True,
    "min_substring_length": 0,
    "simple": False,
    "history_file": None,
    "log_file": None,
}


class Settings(BaseModel):
    """Settings for a Shell.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}

    # Loop settings
    threaded: Optional[bool] = Field(
        default=None,
        description="Run the loop body on its own thread while run() blocks"
    )
    history: Optional[bool] = Field(
        default=None,
        description="Append lines that match a command to the editor history"
    )

    # Completion settings
    min_substring_length: Optional[int] = Field(
        default=None,
        ge=0,
        description="Shortest first token for which substring matches are offered"
    )

    # Editor settings
    simple: Optional[bool] = Field(
        default=None,
        description="Use the readline editor (no prompt_toolkit)"
    )
    history_file: Optional[str] = Field(
        default=None,
        description="File backing the editor history (in-memory when unset)"
    )

    # Logging settings
    log_file: Optional[str] = Field(
        default=None,
        description="Write shellkit debug logs to this file"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)
