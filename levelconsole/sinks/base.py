"""Sink base class.

A sink is where a console writes its formatted lines. The console makes
one ``write_string()`` call per line, already holding its lock, so sinks
do not synchronize on their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Sink(ABC):
    """Base class for console output destinations."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write raw bytes; returns the number of bytes accepted."""
        ...

    @abstractmethod
    def write_string(self, text: str) -> int:
        """Write a string; returns the number of characters accepted."""
        ...

    def flush(self):
        """Flush any buffered output. Default is a no-op."""
        pass


def as_sink(target) -> Sink:
    """Adapt ``target`` to a Sink.

    Sinks pass through; any object with a ``write`` method (a text or
    binary stream, ``sys.stdout``, an open file) is wrapped in a
    ``StreamSink``.

    Raises:
        TypeError: If ``target`` cannot be written to.
    """
    from .stream import StreamSink

    if isinstance(target, Sink):
        return target
    if callable(getattr(target, 'write', None)):
        return StreamSink(target)
    raise TypeError(
        f"Cannot use {type(target).__name__} as a sink: expected a Sink "
        f"or an object with a write() method."
    )
