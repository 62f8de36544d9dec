# topmark:header:start
#
#   project      : LineCat
#   file         : test_formatter.py
#   file_relpath : tests/pipeline/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for numbering and end-marker formatting."""

from __future__ import annotations

from linecat.pipeline.formatter import LineCounter, LineFormatter
from linecat.pipeline.scanner import Line
from tests.conftest import mark_pipeline


@mark_pipeline
def test_pass_through() -> None:
    fmt = LineFormatter()
    assert fmt.format(Line(b"abc")) == b"abc\n"
    assert fmt.format(Line(b"abc", had_terminator=False)) == b"abc"


@mark_pipeline
def test_numbering_is_right_aligned_with_tab() -> None:
    fmt = LineFormatter(number_lines=True)
    assert fmt.format(Line(b"foo")) == b"     1\tfoo\n"
    assert fmt.format(Line(b"")) == b"     2\t\n"


@mark_pipeline
def test_number_wider_than_column() -> None:
    fmt = LineFormatter(number_lines=True, number_width=2, counter=LineCounter(start=123))
    assert fmt.format(Line(b"x")) == b"123\tx\n"


@mark_pipeline
def test_show_ends_before_terminator() -> None:
    fmt = LineFormatter(show_ends=True)
    assert fmt.format(Line(b"foo")) == b"foo$\n"
    assert fmt.format(Line(b"dos\r")) == b"dos\r$\n"


@mark_pipeline
def test_show_ends_on_unterminated_line_adds_no_terminator() -> None:
    fmt = LineFormatter(show_ends=True)
    assert fmt.format(Line(b"bar", had_terminator=False)) == b"bar$"


@mark_pipeline
def test_both_flags() -> None:
    fmt = LineFormatter(number_lines=True, show_ends=True)
    out = fmt.format(Line(b"foo")) + fmt.format(Line(b"bar", had_terminator=False))
    assert out == b"     1\tfoo$\n     2\tbar$"


@mark_pipeline
def test_shared_counter_continues() -> None:
    counter = LineCounter()
    first = LineFormatter(number_lines=True, counter=counter)
    second = LineFormatter(number_lines=True, counter=counter)
    first.format(Line(b"a"))
    assert second.format(Line(b"b")) == b"     2\tb\n"
    assert counter.value == 3


@mark_pipeline
def test_counter_untouched_without_numbering() -> None:
    counter = LineCounter()
    LineFormatter(show_ends=True, counter=counter).format(Line(b"a"))
    assert counter.value == 1
