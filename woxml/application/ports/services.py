from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.output import OutputMode


@runtime_checkable
class SinkPort(Protocol):
    """Append-only byte destination.

    Both operations may raise; the writer wraps whatever they raise in
    ``SinkError`` and never retries.
    """

    def write(self, data: bytes) -> None: ...

    def flush(self) -> None: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_session_start(self, mode: OutputMode) -> None: ...

    def log_element(self, name: str, depth: int) -> None: ...

    def log_rejected(self, operation: str, error: Exception) -> None: ...

    def log_session_end(self, elements_written: int, bytes_written: int) -> None: ...
