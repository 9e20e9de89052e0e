"""Stream slots used as a context's stdin, stdout and stderr."""

from __future__ import annotations

from abc import ABC, abstractmethod
import io
from typing import IO, Iterator, List


class TextStream(ABC):
    """Base class for anything that can sit in a stdin/stdout/stderr slot."""

    @abstractmethod
    def read(self, size: int = -1) -> str:
        """Consume and return up to ``size`` characters (everything when negative)."""

    @abstractmethod
    def readline(self) -> str:
        """Consume and return the next line, including its newline."""

    @abstractmethod
    def write(self, text: str) -> int:
        """Append ``text`` to the stream."""

    @abstractmethod
    def getvalue(self) -> str:
        """Return the stream's current contents."""

    def close(self) -> None:
        return None

    def new_source(self) -> "TextBuffer":
        """Return an independent readable copy of the current contents."""
        return TextBuffer(self.getvalue())

    def read_lines(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if not line:
                return
            yield _strip_line_ending(line)

    def read_words(self) -> Iterator[str]:
        for line in self.read_lines():
            yield from line.split()

    def strings(self) -> List[str]:
        return self.getvalue().splitlines()

    def trimmed_string(self) -> str:
        return self.getvalue().strip()

    def parse_int(self) -> int:
        """Interpret the contents as an integer; raises ``ValueError`` otherwise."""
        return int(self.trimmed_string())

    def __str__(self) -> str:
        return self.getvalue()


class TextBuffer(TextStream):
    """In-memory stream. Reads consume from the front, writes append to the end."""

    def __init__(self, initial: str = "") -> None:
        self._buffer = io.StringIO()
        self._read_pos = 0
        if initial:
            self._buffer.write(initial)

    def read(self, size: int = -1) -> str:
        self._buffer.seek(self._read_pos)
        data = self._buffer.read() if size is None or size < 0 else self._buffer.read(size)
        self._read_pos = self._buffer.tell()
        return data

    def readline(self) -> str:
        self._buffer.seek(self._read_pos)
        line = self._buffer.readline()
        self._read_pos = self._buffer.tell()
        return line

    def write(self, text: str) -> int:
        self._buffer.seek(0, io.SEEK_END)
        return self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()[self._read_pos:]

    def __repr__(self) -> str:
        return f"TextBuffer({self.getvalue()!r})"


class TextFile(TextStream):
    """Wraps a real file object, such as the process's own standard streams.

    ``getvalue()`` on a readable file consumes what is left of it. When ``owned``
    is set, the wrapped file is closed once reading reaches EOF or on ``close()``.
    """

    def __init__(self, stream: IO[str], *, owned: bool = False) -> None:
        self._stream = stream
        self._owned = owned
        self._closed = False

    def read(self, size: int = -1) -> str:
        if self._closed:
            return ""
        if size is None or size < 0:
            data = self._stream.read()
            self._at_eof()
            return data
        data = self._stream.read(size)
        if not data:
            self._at_eof()
        return data

    def readline(self) -> str:
        if self._closed:
            return ""
        line = self._stream.readline()
        if not line:
            self._at_eof()
        return line

    def write(self, text: str) -> int:
        written = self._stream.write(text)
        self._stream.flush()
        return written if written is not None else len(text)

    def getvalue(self) -> str:
        if self._closed or not self._stream.readable():
            return ""
        return self.read()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owned:
            self._stream.close()

    def _at_eof(self) -> None:
        if self._owned:
            self.close()

    def __repr__(self) -> str:
        name = getattr(self._stream, "name", type(self._stream).__name__)
        return f"TextFile({name!r})"


class DevNull(TextStream):
    """Discard sink: writes vanish and reads are always empty."""

    def read(self, size: int = -1) -> str:
        return ""

    def readline(self) -> str:
        return ""

    def write(self, text: str) -> int:
        return len(text)

    def getvalue(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "DevNull()"


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
