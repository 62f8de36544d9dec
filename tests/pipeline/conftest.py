# topmark:header:start
#
#   project      : LineCat
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for stream engine tests.

Provides in-memory sinks and streams so the engine can be exercised without
touching the process's real standard streams.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from linecat.pipeline.engine import process

if TYPE_CHECKING:
    from linecat.config import RunConfig
    from linecat.pipeline.outcomes import RunOutcome, SourceFailure


class BytesSink:
    """In-memory `WritableSink` recording writes and flushes."""

    def __init__(self) -> None:
        self.data = bytearray()
        self.flushes = 0

    def write(self, data: bytes) -> int:
        self.data += data
        return len(data)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def value(self) -> bytes:
        return bytes(self.data)


class FlakyStream(io.RawIOBase):
    """Readable stream that serves ``data`` and then raises ``OSError``.

    Args:
        data (bytes): Bytes served before the failure.
        chunk (int): Maximum bytes returned per read.
    """

    def __init__(self, data: bytes, chunk: int = 4) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk
        self.reads = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self._pos >= len(self._data):
            raise OSError(5, "Input/output error")
        n: int = self._chunk if size < 0 else min(size, self._chunk)
        out: bytes = self._data[self._pos : self._pos + n]
        self._pos += len(out)
        return out


class ChunkedStream(io.RawIOBase):
    """Readable stream returning at most ``chunk`` bytes per read (no ``read1``)."""

    def __init__(self, data: bytes, chunk: int) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        n: int = self._chunk if size < 0 else min(size, self._chunk)
        out: bytes = self._data[self._pos : self._pos + n]
        self._pos += len(out)
        return out


def run_engine(
    config: RunConfig,
    *,
    stdin: bytes = b"",
) -> tuple[bytes, RunOutcome, list[SourceFailure]]:
    """Run the engine with an in-memory sink and stdin.

    Returns:
        tuple[bytes, RunOutcome, list[SourceFailure]]: The output bytes, the outcome
            and the failures reported through the callback.
    """
    sink = BytesSink()
    reported: list[SourceFailure] = []
    outcome: RunOutcome = process(
        config,
        sink,
        stdin=io.BytesIO(stdin),
        on_failure=reported.append,
    )
    return sink.value, outcome, reported
