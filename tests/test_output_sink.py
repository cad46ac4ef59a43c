"""Tests for output destination selection."""

import io
import sys

import pytest

from CorsikaGrisu.core.output_sink import OutputSink
from CorsikaGrisu.utils.validation import OutputFileError


def test_stdout_sentinel(capsys):
    sink = OutputSink.open('stdout')
    sink.write_line("S 1")
    sink.close()

    assert sink.stream is sys.stdout
    assert not sink.owns_stream
    assert capsys.readouterr().out == "S 1\n"


def test_file_sink(tmp_path):
    path = tmp_path / "out.txt"
    with OutputSink.open(str(path)) as sink:
        sink.write_line("first")
        sink.write_line()

    assert path.read_text() == "first\n\n"
    assert sink.stream.closed


def test_injected_stream_stays_open():
    stream = io.StringIO()
    sink = OutputSink.from_stream(stream, name='memory')
    sink.write_line("x")
    sink.close()

    assert not stream.closed
    assert sink.name == 'memory'


def test_open_failure(tmp_path):
    with pytest.raises(OutputFileError) as excinfo:
        OutputSink.open(str(tmp_path / "no" / "such" / "dir.txt"))
    assert "no" in excinfo.value.path
