"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Split the data read from a stream into lines.

    The stream needs only a read(size) method returning str or bytes; lines
    come back as the same type. Each line keeps its trailing newline, except
    a final line that has none.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted.

        If reading fails, the error propagates and buffered data is discarded.
        """
        pending = self._pending
        self._pending = None
        newline_at = -1
        searched = 0
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                newline_at = pending.find(newline, searched)
                if newline_at >= 0:
                    break
                searched = len(pending)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            return None
        if newline_at < 0:
            return pending
        line = pending[: newline_at + 1]
        rest = pending[newline_at + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line