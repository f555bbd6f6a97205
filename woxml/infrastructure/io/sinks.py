from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import SinkPort
from ...domain.exceptions import SinkWriteError

if TYPE_CHECKING:
    from typing import BinaryIO


class BytesSink(SinkPort):
    """In-memory sink backed by a ``bytearray``."""

    def __init__(self) -> None:
        super().__init__()
        self._buffer = bytearray()

    @override
    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    @override
    def flush(self) -> None:
        return

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class StreamSink(SinkPort):
    """Sink over a binary stream such as an open file or ``sys.stdout.buffer``.

    The stream is not closed by the sink; whoever opened it owns it.
    """

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self.stream = stream

    @override
    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = self.stream.write(view)
            if written is None:
                # Raw non-blocking streams report "would block" as None.
                raise SinkWriteError("stream is not ready to accept bytes")
            if written == 0:
                raise SinkWriteError("failed to write whole buffer")
            view = view[written:]

    @override
    def flush(self) -> None:
        self.stream.flush()
