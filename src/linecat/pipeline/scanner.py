# topmark:header:start
#
#   project      : LineCat
#   file         : scanner.py
#   file_relpath : src/linecat/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Chunked line scanner.

`iter_lines` reads a binary stream through a bounded buffer and yields one
`Line` per ``\n``-terminated run of bytes. Scanning works on a pending buffer
with a cursor:

  * every ``\n`` found at or after the cursor closes a line;
  * when no terminator is left in the pending data, the consumed prefix is
    dropped and the next chunk is appended (a line longer than the buffer simply
    grows the pending data);
  * at end of stream, leftover bytes form a final line without terminator.

A chunk edge therefore never splits or truncates a line. Only ``\n`` is a
terminator; a preceding ``\r`` stays part of the line content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from linecat.config.logging import get_logger
from linecat.constants import DEFAULT_BUFFER_SIZE, LINE_TERMINATOR

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from linecat.config.logging import LinecatLogger

logger: LinecatLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Line:
    """One line of a source.

    Attributes:
        content (bytes): The line bytes, without the terminator.
        had_terminator (bool): False only for a final line that ends the source
            without a terminator.
    """

    content: bytes
    had_terminator: bool = True


def _chunk_reader(stream: IO[bytes]) -> Callable[[int], bytes]:
    # read1() returns whatever is available instead of blocking for a full
    # buffer, which keeps interactive stdin responsive.
    read1: Callable[[int], bytes] | None = getattr(stream, "read1", None)
    return read1 if read1 is not None else stream.read


def iter_lines(stream: IO[bytes], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Line]:
    """Lazily split a binary stream into lines.

    Args:
        stream (IO[bytes]): Source stream, read in chunks of at most ``buffer_size`` bytes.
        buffer_size (int): Maximum number of bytes requested per read.

    Yields:
        Line: Each line in stream order. The last one has ``had_terminator=False``
            when the stream does not end with a terminator. An empty stream yields nothing.

    Raises:
        ValueError: If ``buffer_size`` is smaller than 1.
        OSError: Propagated unchanged from the underlying ``read`` calls.
    """
    if buffer_size < 1:
        raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")

    read: Callable[[int], bytes] = _chunk_reader(stream)
    pending = bytearray()
    n_chunks = 0

    while True:
        chunk: bytes = read(buffer_size)
        if not chunk:
            break
        n_chunks += 1
        # The carried tail holds no terminator, so searching starts at the new chunk.
        search_from: int = len(pending)
        pending += chunk

        cursor = 0
        while True:
            idx: int = pending.find(LINE_TERMINATOR, search_from)
            if idx < 0:
                break
            yield Line(bytes(pending[cursor:idx]), True)
            cursor = search_from = idx + 1

        # Keep only the unterminated tail; it is completed by later chunks.
        del pending[:cursor]

    if pending:
        yield Line(bytes(pending), False)

    logger.trace("Scanned %d chunk(s)", n_chunks)
