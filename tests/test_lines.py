import io
import os

import pytest

from pipex.lines import LineReader

SAMPLES = [
    b"first line\nsecond\n\nlast without newline",
    b"one\ntwo\nthree\n",
    b"\n\n\n",
    b"no newline at all",
]


@pytest.mark.parametrize("data", SAMPLES)
@pytest.mark.parametrize("buffer_size", [1, 3, 7, 1024])
def test_lines_match_splitlines(data, buffer_size):
    reader = LineReader(io.BytesIO(data), buffer_size)
    assert list(reader) == data.splitlines(keepends=True)


@pytest.mark.parametrize("data", SAMPLES)
def test_lines_join_back_to_input(data):
    assert b"".join(LineReader(io.BytesIO(data))) == data


def test_text_source():
    text = "alpha\nbeta\ngamma"
    assert list(LineReader(io.StringIO(text))) == text.splitlines(keepends=True)


def test_empty_source_returns_none():
    reader = LineReader(io.BytesIO(b""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_then_exhaustion():
    reader = LineReader(io.BytesIO(b"a\nb"))
    assert reader.read_line() == b"a\n"
    assert reader.read_line() == b"b"
    assert reader.read_line() is None


def test_file_descriptor_source(tmp_path):
    path = tmp_path / "input.txt"
    data = b"hello\nworld\n"
    path.write_bytes(data)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd))
    finally:
        os.close(fd)
    assert lines == data.splitlines(keepends=True)


def test_independent_readers_interleave():
    first = LineReader(io.BytesIO(b"a1\na2\n"))
    second = LineReader(io.BytesIO(b"b1\nb2\n"))
    assert first.read_line() == b"a1\n"
    assert second.read_line() == b"b1\n"
    assert first.read_line() == b"a2\n"
    assert second.read_line() == b"b2\n"


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), size)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


class _FailingSource:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls > 1:
            raise OSError("read failed")
        return b"ab"


def test_read_error_propagates_and_clears():
    source = _FailingSource()
    reader = LineReader(source, 2)
    with pytest.raises(OSError):
        reader.read_line()
    assert source.calls == 2


def test_closed_descriptor_raises(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"x\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).read_line()