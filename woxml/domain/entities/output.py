from __future__ import annotations

from enum import Enum


class OutputMode(Enum):
    COMPACT = "compact"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | OutputMode) -> OutputMode:
        if isinstance(value, OutputMode):
            return value
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown output mode {value!r}, expected one of: {choices}")


class WriterLifecycle(Enum):
    OPEN = "open"
    CLOSED = "closed"
