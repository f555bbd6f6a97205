from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.output import OutputMode


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_session_start(self, mode: OutputMode) -> None:
        return None

    @override
    def log_element(self, name: str, depth: int) -> None:
        return None

    @override
    def log_rejected(self, operation: str, error: Exception) -> None:
        return None

    @override
    def log_session_end(self, elements_written: int, bytes_written: int) -> None:
        return None
