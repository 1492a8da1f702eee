"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 32


class LineReader(Generic[AnyStr]):
    """Yields the lines of a text or binary stream, newlines kept.

    The stream is read ``buffer_size`` units at a time; whatever follows a
    returned line stays buffered for the next call. The last line is returned
    even without a trailing newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None
        self._eof = False

    def _fill(self) -> None:
        while not self._eof and (self._buffer is None or self._newline not in self._buffer):
            chunk = self._stream.read(self._size)
            if not chunk:
                self._eof = True
            elif self._buffer is None:
                self._buffer = chunk
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
            else:
                self._buffer += chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._buffer:
            return None
        end = self._buffer.find(self._newline)
        if end < 0:
            line = self._buffer
            self._buffer = self._buffer[:0]
        else:
            line = self._buffer[: end + 1]
            self._buffer = self._buffer[end + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line