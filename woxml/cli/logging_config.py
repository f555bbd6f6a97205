"""Logger construction for the CLI commands."""

from __future__ import annotations

from rich.console import Console

from ..infrastructure.logging.console_logger import ConsoleLogger, LogContext, LogLevel

__all__ = [
    "ConsoleLogger",
    "LogLevel",
    "LogContext",
    "create_logger",
]


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    """Create a logger instance for one command run.

    Args:
        console: Rich console for output
        verbosity: Verbosity level

    Returns:
        The new logger instance
    """
    return ConsoleLogger(console, verbosity)
