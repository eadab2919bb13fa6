"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 2048


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read in blocks of buffer_size. A final line without a
    newline is returned as it is; after that every read gives None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._buffer: AnyStr | None = None
        self._scanned = 0
        self._eof = False
        self._finished = False

    def _fill(self) -> bool:
        """Read one more block; return False at end of stream."""
        chunk = self._stream.read(self._size)
        if chunk is None:
            chunk = b"" if self._buffer is None else self._buffer[:0]
        if self._buffer is None:
            self._buffer = chunk[:0]
        if not chunk:
            self._eof = True
            return False
        self._buffer += chunk
        return True

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        if self._finished:
            return None
        while True:
            if self._buffer is not None:
                newline = "\n" if isinstance(self._buffer, str) else b"\n"
                index = self._buffer.find(newline, self._scanned)
                if index >= 0:
                    line = self._buffer[: index + 1]
                    self._buffer = self._buffer[index + 1 :]
                    self._scanned = 0
                    return line
                self._scanned = len(self._buffer)
            if self._eof or not self._fill():
                break
        if self._buffer:
            line = self._buffer
            self._buffer = self._buffer[:0]
            self._scanned = 0
            return line
        self._finished = True
        return None

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)