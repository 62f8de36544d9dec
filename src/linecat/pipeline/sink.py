# topmark:header:start
#
#   project      : LineCat
#   file         : sink.py
#   file_relpath : src/linecat/pipeline/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink abstraction and buffered implementation.

The engine only depends on the small `WritableSink` protocol, so tests can pass
an in-memory object. `BufferedSink` wraps a binary stream, batches writes up to
a byte budget and reports any OS-level write failure as `SinkWriteError`.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Protocol

from linecat.config.logging import get_logger
from linecat.constants import DEFAULT_BUFFER_SIZE
from linecat.pipeline.errors import SinkWriteError, describe_os_error

if TYPE_CHECKING:
    from linecat.config.logging import LinecatLogger

logger: LinecatLogger = get_logger(__name__)


class WritableSink(Protocol):
    """Minimal interface for the destination of a run."""

    def write(self, data: bytes) -> object:
        """Append ``data`` to the sink."""
        ...

    def flush(self) -> None:
        """Push buffered data to the underlying destination."""
        ...


class BufferedSink:
    """Batching `WritableSink` over a binary stream.

    Args:
        stream (IO[bytes]): Destination stream (e.g. the binary standard output).
        buffer_size (int): Number of bytes collected before they are written out.

    Attributes:
        bytes_written (int): Total bytes handed to the underlying stream so far.
    """

    def __init__(self, stream: IO[bytes], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer = bytearray()
        self.buffer_size = buffer_size
        self.bytes_written = 0

    def write(self, data: bytes) -> int:
        """Buffer ``data``; spill to the stream once the buffer is full.

        Raises:
            SinkWriteError: If the underlying stream rejects the data.
        """
        self._buffer += data
        if len(self._buffer) >= self.buffer_size:
            self._spill()
        return len(data)

    def flush(self) -> None:
        """Write out all buffered data and flush the stream.

        Raises:
            SinkWriteError: If the underlying stream rejects the data.
        """
        self._spill()
        try:
            self._stream.flush()
        except OSError as exc:
            raise SinkWriteError(describe_os_error(exc)) from exc

    def _spill(self) -> None:
        if not self._buffer:
            return
        data = bytes(self._buffer)
        self._buffer.clear()
        try:
            self._stream.write(data)
        except OSError as exc:
            logger.debug("Write of %d byte(s) failed: %r", len(data), exc)
            raise SinkWriteError(describe_os_error(exc)) from exc
        self.bytes_written += len(data)
