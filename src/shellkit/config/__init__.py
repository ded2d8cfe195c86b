"""Settings for shellkit sessions."""

from shellkit.config.config import DEFAULTS, Settings

__all__ = [
    "DEFAULTS",
    "Settings",
]
