from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape as escape_markup

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from ...domain.entities.output import OutputMode


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    document: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "elements_written": 0,
        "bytes_written": 0,
        "rejected_calls": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_session_start(self, mode: OutputMode) -> None:
        self.set_context(operation="write")
        self.verbose(f"Started {mode.value} XML writer session")

    @override
    def log_element(self, name: str, depth: int) -> None:
        self._stats["elements_written"] += 1
        self.debug(f"{'  ' * depth}<{escape_markup(name)}>")

    @override
    def log_rejected(self, operation: str, error: Exception) -> None:
        self._stats["rejected_calls"] += 1
        self.verbose(f"Rejected {operation}(): {escape_markup(str(error))}")

    @override
    def log_session_end(self, elements_written: int, bytes_written: int) -> None:
        self._stats["bytes_written"] += bytes_written
        elapsed = ""
        if self._context is not None:
            elapsed = f" in {self._context.elapsed_ms():.1f} ms"
        self.verbose(
            f"Closed writer: {elements_written:,} elements, "
            f"{bytes_written:,} bytes{elapsed}"
        )

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Writer Statistics:[/dim]")
            self.console.print(
                f"[dim]  Elements written: {self._stats['elements_written']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Bytes written: {self._stats['bytes_written']:,}[/dim]"
            )
            if self._stats["rejected_calls"] > 0:
                self.console.print(
                    f"[dim yellow]  Rejected calls: {self._stats['rejected_calls']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.document:
            return escape_markup(f"[{self._context.document}] ")
        return ""
