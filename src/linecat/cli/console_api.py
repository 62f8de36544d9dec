# topmark:header:start
#
#   project      : LineCat
#   file         : console_api.py
#   file_relpath : src/linecat/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for user-facing diagnostics.

Standard output carries the data stream, so the console surface only writes to
standard error. It is kept separate from the logging subsystem.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the CLI command."""

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...
