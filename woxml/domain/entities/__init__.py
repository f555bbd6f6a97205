"""Domain entities.

Element stack entries, output modes and writer lifecycle states.
"""

from .element import ElementEntry, ElementWriteState
from .output import OutputMode, WriterLifecycle

__all__ = [
    "ElementEntry",
    "ElementWriteState",
    "OutputMode",
    "WriterLifecycle",
]
