"""
Tests for the console input and output adapters.
"""

import io

import pytest

from console.streams import TokenReader, OutputSink
from console.errors import NoInputError, OutputError


def test_tokens_split_on_any_whitespace():
    reader = TokenReader(io.StringIO("1  2\t3\n\n 4\r\nq"))
    assert list(reader) == ["1", "2", "3", "4", "q"]


def test_reader_accepts_list_of_lines():
    assert list(TokenReader(["a b", "", "c"])) == ["a", "b", "c"]


def test_reader_reads_lazily():
    lines = iter(["1 2", "3"])
    reader = TokenReader(lines)
    assert next(reader) == "1"
    assert next(reader) == "2"
    # Second line not consumed yet
    assert next(lines) == "3"
    with pytest.raises(StopIteration):
        next(reader)


def test_reader_rejects_none():
    with pytest.raises(ValueError):
        TokenReader(None)


def test_sink_appends():
    out = io.StringIO()
    sink = OutputSink(out)
    sink.append("a")
    sink.append("b\n")
    assert out.getvalue() == "ab\n"


def test_sink_wraps_write_failure():
    class Broken:
        def write(self, text):
            raise OSError("broken pipe")

    with pytest.raises(OutputError, match="Append failed"):
        OutputSink(Broken()).append("x")


def test_sink_rejects_none():
    with pytest.raises(ValueError):
        OutputSink(None)


def test_sink_wraps_closed_stream():
    out = io.StringIO()
    out.close()
    with pytest.raises(OutputError) as exc:
        OutputSink(out).append("x")
    assert isinstance(exc.value.__cause__, ValueError)


def test_reader_rejects_undecodable_input():
    stream = io.TextIOWrapper(io.BytesIO(b"1 1\n\xff\xfe 2\n"), encoding="utf-8")
    with pytest.raises(NoInputError) as exc:
        list(TokenReader(stream))
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
