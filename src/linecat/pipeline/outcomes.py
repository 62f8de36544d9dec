# topmark:header:start
#
#   project      : LineCat
#   file         : outcomes.py
#   file_relpath : src/linecat/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run outcome: the aggregated success/failure report of one run.

The outcome is presentation-free; frontends decide how to display failures
and which exit status to use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linecat.pipeline.sources import SourceId
    from linecat.pipeline.status import ErrorKind


@dataclass(frozen=True)
class SourceFailure:
    """A source that failed to open or to read.

    Attributes:
        source (SourceId): The failing source.
        kind (ErrorKind): Failure classification.
        reason (str): Human-readable reason.
    """

    source: SourceId
    kind: ErrorKind
    reason: str


@dataclass
class RunOutcome:
    """Outcome built incrementally while a run progresses.

    Attributes:
        sources_failed (list[SourceFailure]): Failures, in processing order.
        sources_read (int): Sources read to exhaustion.
        lines_written (int): Lines handed to the sink.
    """

    sources_failed: list[SourceFailure] = field(default_factory=lambda: [])
    sources_read: int = 0
    lines_written: int = 0

    @property
    def ok(self) -> bool:
        """True when no source failed."""
        return not self.sources_failed

    def record_failure(self, failure: SourceFailure) -> None:
        """Append a failure."""
        self.sources_failed.append(failure)
