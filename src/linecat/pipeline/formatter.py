# topmark:header:start
#
#   project      : LineCat
#   file         : formatter.py
#   file_relpath : src/linecat/pipeline/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line output transformation (numbering and end markers)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linecat.constants import (
    DEFAULT_NUMBER_WIDTH,
    END_MARKER,
    LINE_TERMINATOR,
    NUMBER_SEPARATOR,
)

if TYPE_CHECKING:
    from linecat.pipeline.scanner import Line


class LineCounter:
    """Run-scoped 1-based line counter, shared by all sources of a run."""

    def __init__(self, start: int = 1) -> None:
        self._value = start

    @property
    def value(self) -> int:
        """The number the next line will receive."""
        return self._value

    def next(self) -> int:
        """Return the current number and advance."""
        value: int = self._value
        self._value += 1
        return value


class LineFormatter:
    """Render a `Line` to output bytes.

    Args:
        number_lines (bool): Prefix each line with a right-aligned running number and a tab.
        show_ends (bool): Append ``$`` after the content of each line.
        number_width (int): Minimum width of the number column.
        counter (LineCounter | None): Counter to draw numbers from. One counter must be
            shared for the whole run so numbering continues across sources.
    """

    def __init__(
        self,
        *,
        number_lines: bool = False,
        show_ends: bool = False,
        number_width: int = DEFAULT_NUMBER_WIDTH,
        counter: LineCounter | None = None,
    ) -> None:
        self.number_lines = number_lines
        self.show_ends = show_ends
        self.number_width = number_width
        self.counter = counter or LineCounter()

    def format(self, line: Line) -> bytes:
        """Return the output bytes for ``line``.

        The terminator is re-appended only when the input line had one, so a
        final unterminated line stays unterminated.
        """
        if not (self.number_lines or self.show_ends):
            return line.content + LINE_TERMINATOR if line.had_terminator else line.content

        parts: list[bytes] = []
        if self.number_lines:
            number: bytes = str(self.counter.next()).rjust(self.number_width).encode("ascii")
            parts += (number, NUMBER_SEPARATOR)
        parts.append(line.content)
        if self.show_ends:
            parts.append(END_MARKER)
        if line.had_terminator:
            parts.append(LINE_TERMINATOR)
        return b"".join(parts)
