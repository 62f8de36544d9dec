# topmark:header:start
#
#   project      : LineCat
#   file         : engine.py
#   file_relpath : src/linecat/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream processing engine.

`StreamProcessor` drives one run: sources are processed strictly in order, one
open handle at a time. For every source the engine opens it, scans it into
lines, formats each line and writes the result to the sink.

Failure semantics:
  * open failures and mid-read failures are recorded in the `RunOutcome`,
    reported through the ``on_failure`` callback, and the run continues with
    the next source;
  * `SinkWriteError` is not caught: if output cannot be written the run stops
    immediately and the error reaches the caller.

The line counter is owned by the run, so numbering is continuous across sources.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from linecat.config.logging import get_logger
from linecat.pipeline.errors import SourceError, SourceReadError, describe_os_error
from linecat.pipeline.formatter import LineCounter, LineFormatter
from linecat.pipeline.outcomes import RunOutcome, SourceFailure
from linecat.pipeline.scanner import iter_lines
from linecat.pipeline.sources import StdinSource, open_source

if TYPE_CHECKING:
    from collections.abc import Callable

    from linecat.config.logging import LinecatLogger
    from linecat.config.model import RunConfig
    from linecat.pipeline.sink import WritableSink
    from linecat.pipeline.sources import SourceId

    FailureCallback = Callable[[SourceFailure], None]

logger: LinecatLogger = get_logger(__name__)


class StreamProcessor:
    """Process all sources of a `RunConfig` into a sink.

    Args:
        config (RunConfig): Resolved run configuration.
        sink (WritableSink): Destination of the transformed bytes.
        stdin (IO[bytes] | None): Stream bound to standard-input sources; defaults
            to the process's binary standard input.
        on_failure (FailureCallback | None): Called once per failed source, right
            after the failure is recorded (used by frontends for diagnostics).
    """

    def __init__(
        self,
        config: RunConfig,
        sink: WritableSink,
        *,
        stdin: IO[bytes] | None = None,
        on_failure: FailureCallback | None = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self.stdin = stdin
        self.on_failure = on_failure
        self.counter = LineCounter()
        self.formatter = LineFormatter(
            number_lines=config.number_lines,
            show_ends=config.show_ends,
            number_width=config.number_width,
            counter=self.counter,
        )

    @property
    def sources(self) -> tuple[SourceId, ...]:
        """Sources to process; falls back to standard input when none are configured."""
        return self.config.sources or (StdinSource(),)

    def run(self) -> RunOutcome:
        """Process every source in order and return the aggregated outcome.

        Raises:
            SinkWriteError: If writing to the sink fails; the run is aborted.
        """
        outcome = RunOutcome()
        for source in self.sources:
            try:
                self._process_source(source, outcome)
            except SourceError as exc:
                self._record(outcome, SourceFailure(exc.source, exc.kind, exc.reason))
            # Per-source flush keeps output ordered with stderr diagnostics.
            self.sink.flush()
        self.sink.flush()
        logger.info(
            "Run complete: %d source(s) read, %d failed, %d line(s) written",
            outcome.sources_read,
            len(outcome.sources_failed),
            outcome.lines_written,
        )
        return outcome

    def _process_source(self, source: SourceId, outcome: RunOutcome) -> None:
        logger.debug("Processing source %s", source.display_name)
        with open_source(source, stdin=self.stdin) as stream:
            lines = iter_lines(stream, self.config.buffer_size)
            while True:
                try:
                    line = next(lines, None)
                except OSError as exc:
                    raise SourceReadError(source, describe_os_error(exc)) from exc
                if line is None:
                    break
                self.sink.write(self.formatter.format(line))
                outcome.lines_written += 1
        outcome.sources_read += 1

    def _record(self, outcome: RunOutcome, failure: SourceFailure) -> None:
        logger.warning(
            "Source %s failed (%s): %s",
            failure.source.display_name,
            failure.kind.value,
            failure.reason,
        )
        outcome.record_failure(failure)
        if self.on_failure is not None:
            self.on_failure(failure)


def process(
    config: RunConfig,
    sink: WritableSink,
    *,
    stdin: IO[bytes] | None = None,
    on_failure: FailureCallback | None = None,
) -> RunOutcome:
    """Run the stream engine once; see `StreamProcessor`.

    Returns:
        RunOutcome: The aggregated outcome of the run.

    Raises:
        SinkWriteError: If writing to the sink fails.
    """
    return StreamProcessor(config, sink, stdin=stdin, on_failure=on_failure).run()
