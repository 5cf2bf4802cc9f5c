"""Stream sink wrapping a file-like object."""

from __future__ import annotations

import io

from .base import Sink


class StreamSink(Sink):
    """Write lines to a text or binary stream.

    Binary streams (``io.BytesIO``, files opened with ``'b'``) receive
    UTF-8 encoded bytes; anything else is treated as a text stream.
    The stream is flushed after every write when it supports it.
    """

    def __init__(self, stream, encoding: str = "utf-8"):
        """
        Args:
            stream: Object with a ``write`` method.
            encoding: Encoding used to move between bytes and text.
        """
        self.stream = stream
        self.encoding = encoding
        self._binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))

    def write(self, data: bytes) -> int:
        if self._binary:
            self.stream.write(data)
        else:
            self.stream.write(data.decode(self.encoding, errors="replace"))
        self.flush()
        return len(data)

    def write_string(self, text: str) -> int:
        if self._binary:
            self.stream.write(text.encode(self.encoding))
        else:
            self.stream.write(text)
        self.flush()
        return len(text)

    def flush(self):
        flush = getattr(self.stream, 'flush', None)
        if flush is not None:
            flush()
