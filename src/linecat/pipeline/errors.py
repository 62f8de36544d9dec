# topmark:header:start
#
#   project      : LineCat
#   file         : errors.py
#   file_relpath : src/linecat/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the stream processing pipeline.

Per-source errors (`SourceOpenError`, `SourceReadError`) are caught by the
engine and recorded in the run outcome. `SinkWriteError` is never caught by the
engine: when output can no longer be written the run is aborted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linecat.pipeline.status import ErrorKind

if TYPE_CHECKING:
    from linecat.pipeline.sources import SourceId


class LinecatPipelineError(Exception):
    """Base class for all pipeline errors."""


class SourceError(LinecatPipelineError):
    """A single source failed; the run continues with the next one.

    Attributes:
        source (SourceId): The failing source.
        kind (ErrorKind): Failure classification.
        reason (str): Human-readable reason (e.g. ``"No such file or directory"``).
    """

    def __init__(self, source: SourceId, kind: ErrorKind, reason: str) -> None:
        super().__init__(f"{source.display_name}: {reason}")
        self.source = source
        self.kind = kind
        self.reason = reason


class SourceOpenError(SourceError):
    """The source could not be opened."""


class SourceReadError(SourceError):
    """The source was opened but reading from it failed."""

    def __init__(self, source: SourceId, reason: str) -> None:
        super().__init__(source, ErrorKind.SOURCE_READ_FAILURE, reason)


class SinkWriteError(LinecatPipelineError):
    """Writing to the output sink failed; fatal to the whole run."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"write error: {reason}")
        self.reason = reason


def describe_os_error(exc: OSError) -> str:
    """Return the short, user-facing reason for an OS error."""
    return exc.strerror or str(exc) or exc.__class__.__name__
