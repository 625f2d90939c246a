"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 9


class LineReader(Generic[AnyStr]):
    """Hands out the lines of a text or binary stream one at a time.

    Data is pulled from the stream in chunks of buffer_size. Each line keeps
    its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _prepare(self) -> None:
        # A zero-length read checks the stream and tells text from binary.
        empty = self._stream.read(0)
        self._pending = empty
        self._newline = b"\n" if isinstance(empty, bytes) else "\n"

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        if self._pending is None:
            self._prepare()
        while True:
            index = self._pending.find(self._newline)
            if index >= 0:
                line = self._pending[:index + 1]
                self._pending = self._pending[index + 1:]
                return line
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = self._pending[:0]
                raise
            if not chunk:
                if self._pending:
                    line = self._pending
                    self._pending = self._pending[:0]
                    return line
                return None
            self._pending += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of stream, newlines kept."""
    yield from LineReader(stream)