import io

import pytest

from libft.lines import LineReader


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 42, 1000])
def test_lines_reassemble_input(buffer_size):
    text = "first\nsecond line\n\nlast"
    lines = list(LineReader(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("a\nb\nc"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "b\n"
    assert reader.next_line() == "c"
    assert reader.next_line() is None


def test_trailing_newline_gives_no_empty_line():
    assert list(LineReader(io.StringIO("x\ny\n"), 4)) == ["x\n", "y\n"]


def test_empty_stream():
    assert LineReader(io.StringIO("")).next_line() is None


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_bytes_stream_returns_bytes():
    data = b"one\ntwo"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == [b"one\n", b"two"]


def test_default_buffer_size_handles_long_line():
    text = "z" * 500 + "\nend"
    lines = list(LineReader(io.StringIO(text)))
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_propagates_and_discards_buffer():
    stream = _FailingStream()
    reader = LineReader(stream, 7)
    with pytest.raises(OSError):
        reader.next_line()
    stream.calls = 10
    with pytest.raises(OSError):
        reader.next_line()


class _GrowingStream:
    def __init__(self):
        self.chunks = ["a\n", "", "b\n", ""]

    def read(self, size):
        return self.chunks.pop(0) if self.chunks else ""


def test_reading_resumes_after_end_of_stream():
    reader = LineReader(_GrowingStream(), 8)
    assert reader.next_line() == "a\n"
    assert reader.next_line() is None
    assert reader.next_line() == "b\n"
    assert reader.next_line() is None