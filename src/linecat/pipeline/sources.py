# topmark:header:start
#
#   project      : LineCat
#   file         : sources.py
#   file_relpath : src/linecat/pipeline/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input source identifiers and scoped opening.

A source is either standard input (`StdinSource`) or a file system path
(`PathSource`). Identifiers are resolved from raw CLI strings with
`resolve_sources`, where ``"-"`` selects standard input and an empty list falls
back to a single standard-input source.

`open_source` is the only place where a source is turned into a binary stream.
It reports every open-time failure as `ErrorKind.SOURCE_UNREADABLE` and
guarantees that file handles are closed on every exit path. Standard input is borrowed, never closed.
"""

from __future__ import annotations

import errno
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING

from linecat.config.logging import get_logger
from linecat.constants import STDIN_MARKER
from linecat.pipeline.errors import SourceOpenError, describe_os_error
from linecat.pipeline.status import ErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from linecat.config.logging import LinecatLogger

logger: LinecatLogger = get_logger(__name__)


@dataclass(frozen=True)
class StdinSource:
    """The process's standard input."""

    @property
    def display_name(self) -> str:
        """Name used in diagnostics."""
        return STDIN_MARKER


@dataclass(frozen=True)
class PathSource:
    """A named file.

    Attributes:
        path (str): The path exactly as given by the caller (no globbing).
    """

    path: str

    @property
    def display_name(self) -> str:
        """Name used in diagnostics."""
        return self.path


SourceId = StdinSource | PathSource


def parse_source_id(raw: str) -> SourceId:
    """Map one raw identifier to a `SourceId`; ``"-"`` means standard input."""
    if raw == STDIN_MARKER:
        return StdinSource()
    return PathSource(raw)


def resolve_sources(raw: Iterable[str]) -> tuple[SourceId, ...]:
    """Resolve raw identifiers, preserving order.

    Args:
        raw (Iterable[str]): Identifiers as given on the command line.

    Returns:
        tuple[SourceId, ...]: The resolved sources; ``(StdinSource(),)`` when
            ``raw`` is empty.
    """
    sources: tuple[SourceId, ...] = tuple(parse_source_id(r) for r in raw)
    return sources or (StdinSource(),)


def default_stdin() -> IO[bytes]:
    """Return the binary standard input stream of the process."""
    return sys.stdin.buffer


@contextmanager
def open_source(source: SourceId, *, stdin: IO[bytes] | None = None) -> Iterator[IO[bytes]]:
    """Open ``source`` for binary reading for the duration of the ``with`` block.

    Args:
        source (SourceId): The source to open.
        stdin (IO[bytes] | None): Stream bound to `StdinSource`; defaults to the
            process's binary standard input.

    Yields:
        IO[bytes]: A readable binary stream.

    Raises:
        SourceOpenError: If a path cannot be opened (missing, permission denied,
            a directory, other OS errors). ``kind`` is always
            ``SOURCE_UNREADABLE``; ``reason`` names the cause.
    """
    if isinstance(source, StdinSource):
        yield stdin if stdin is not None else default_stdin()
        return

    path = Path(source.path)
    try:
        # Some platforms allow open() on a directory.
        if path.is_dir():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), source.path)
        fh: IO[bytes] = path.open("rb")
    except OSError as exc:
        logger.debug("Cannot open %s: %r", source.path, exc)
        raise SourceOpenError(source, ErrorKind.SOURCE_UNREADABLE, describe_os_error(exc)) from exc

    logger.trace("Opened %s", source.path)
    try:
        yield fh
    finally:
        fh.close()
        logger.trace("Closed %s", source.path)
