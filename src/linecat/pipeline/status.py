# topmark:header:start
#
#   project      : LineCat
#   file         : status.py
#   file_relpath : src/linecat/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Failure classification for sources processed by the stream engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Why a single source contributed no (or only partial) output.

    The precise cause of an open failure (missing path, permission denied, a
    directory) is carried by the failure's ``reason`` text, not by the kind.

    Attributes:
        SOURCE_UNREADABLE: The source could not be opened for reading: the path
            does not exist, permission is denied, it is a directory, or another
            open-time OS error occurred.
        SOURCE_READ_FAILURE: The source was opened but a later read failed.
    """

    SOURCE_UNREADABLE = "source_unreadable"
    SOURCE_READ_FAILURE = "source_read_failure"

    @property
    def is_open_failure(self) -> bool:
        """Return True for failures raised before any byte was read."""
        return self is ErrorKind.SOURCE_UNREADABLE
