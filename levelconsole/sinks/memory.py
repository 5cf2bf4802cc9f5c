"""In-memory sinks."""

from __future__ import annotations

from .base import Sink


class BufferSink(Sink):
    """Accumulate everything written in a byte buffer.

    Useful for capturing console output in tests or for handing a
    rendered log to another component.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        self._buffer.extend(data)
        return len(data)

    def write_string(self, text: str) -> int:
        self._buffer.extend(text.encode(self.encoding))
        return len(text)

    def getvalue(self) -> str:
        return self._buffer.decode(self.encoding)

    def getbytes(self) -> bytes:
        return bytes(self._buffer)

    def clear(self):
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)


class NullSink(Sink):
    """Discard everything."""

    def write(self, data: bytes) -> int:
        return 0

    def write_string(self, text: str) -> int:
        return 0
