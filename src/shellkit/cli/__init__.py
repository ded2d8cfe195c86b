"""
CLI module for the shellkit package.

Provides a demonstration shell runnable as ``shellkit-demo``.
"""

from shellkit.cli.demo import build_shell, main

__all__ = [
    "build_shell",
    "main",
]
