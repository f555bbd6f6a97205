"""Infrastructure I/O layer.

Byte sinks the writer can emit into.
"""

from .sinks import BytesSink, StreamSink

__all__ = ["BytesSink", "StreamSink"]
