# topmark:header:start
#
#   project      : LineCat
#   file         : test_properties.py
#   file_relpath : tests/pipeline/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the stream engine.

Sources are generated as in-memory byte strings and served one after the other
through a single stdin stream, so no file system access is needed:
1) with both flags off, output equals the concatenated input;
2) numbering forms the contiguous sequence 1..N across sources;
3) with show-ends, every line carries exactly one ``$`` before its terminator;
4) results do not depend on the read buffer size.
"""

from __future__ import annotations

import io
import re

from hypothesis import given, settings
from hypothesis import strategies as st

from linecat.config import RunConfig
from linecat.pipeline.engine import process
from linecat.pipeline.sources import StdinSource
from tests.conftest import mark_pipeline
from tests.pipeline.conftest import BytesSink

# Small alphabet with plenty of terminators and carriage returns.
s_content = st.binary(max_size=200).map(lambda b: b.replace(b"$", b"").replace(b"\t", b""))
s_lined = st.lists(
    st.sampled_from([b"a", b"bc", b"\r", b"\n", b"\n", b"xyz", b""]), max_size=40
).map(b"".join)
s_source = st.one_of(s_content, s_lined)


class MultiStdin(io.RawIOBase):
    """Serve one byte string per `StdinSource`, switching on EOF."""

    def __init__(self, parts: list[bytes]) -> None:
        self._parts = [io.BytesIO(p) for p in parts]
        self._idx = 0
        self._eof_seen = False

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._idx >= len(self._parts):
            return b""
        out: bytes = self._parts[self._idx].read(size)
        if not out:
            self._idx += 1
        return out


def run_parts(parts: list[bytes], *, buffer_size: int = 7, **flags: bool) -> bytes:
    config = RunConfig(sources=tuple(StdinSource() for _ in parts), buffer_size=buffer_size, **flags)
    sink = BytesSink()
    outcome = process(config, sink, stdin=MultiStdin(parts))
    assert outcome.ok
    return sink.value


def count_lines(data: bytes) -> int:
    if not data:
        return 0
    return data.count(b"\n") + (0 if data.endswith(b"\n") else 1)


@mark_pipeline
@settings(max_examples=100, deadline=None)
@given(parts=st.lists(s_source, min_size=1, max_size=5))
def test_identity_pass_through(parts: list[bytes]) -> None:
    assert run_parts(parts) == b"".join(parts)


@mark_pipeline
@settings(max_examples=100, deadline=None)
@given(parts=st.lists(s_content, min_size=1, max_size=5))
def test_numbering_is_contiguous_across_sources(parts: list[bytes]) -> None:
    out = run_parts(parts, number_lines=True)
    # Content carries no tabs and the number column is wider than any number
    # reached here, so each "<digits>\t" is exactly one line prefix.
    numbers = [int(m) for m in re.findall(rb"(\d+)\t", out)]
    total = sum(count_lines(p) for p in parts)
    assert numbers == list(range(1, total + 1))


@mark_pipeline
@settings(max_examples=100, deadline=None)
@given(parts=st.lists(s_content, min_size=1, max_size=5))
def test_end_marker_precedes_every_terminator(parts: list[bytes]) -> None:
    out = run_parts(parts, show_ends=True)
    total = sum(count_lines(p) for p in parts)
    assert out.count(b"$") == total
    assert out.count(b"\n") == sum(p.count(b"\n") for p in parts)
    assert b"\n" not in out.replace(b"$\n", b"")
    if parts[-1] and not parts[-1].endswith(b"\n"):
        assert out.endswith(b"$")


@mark_pipeline
@settings(max_examples=60, deadline=None)
@given(
    parts=st.lists(s_source, min_size=1, max_size=4),
    buffer_size=st.integers(min_value=1, max_value=32),
)
def test_buffer_size_does_not_change_output(parts: list[bytes], buffer_size: int) -> None:
    expected = run_parts(parts, buffer_size=4096, number_lines=True, show_ends=True)
    assert run_parts(parts, buffer_size=buffer_size, number_lines=True, show_ends=True) == expected
