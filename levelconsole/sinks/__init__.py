"""Output sinks that receive formatted console lines."""

from .base import Sink, as_sink
from .stream import StreamSink
from .memory import BufferSink, NullSink

__all__ = [
    'Sink',
    'as_sink',
    'StreamSink',
    'BufferSink',
    'NullSink',
]
