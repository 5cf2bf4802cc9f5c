"""Hook abstract base class and builtin hooks.

A hook observes every message a console emits. ``match()`` decides
whether the hook cares about a message; ``action()`` performs the side
effect. Both run on the emitting thread while the console lock is held,
so a hook must not log through the same console.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..levels import Level


class Hook(ABC):
    """Base class for console hooks.

    Subclasses set ``name`` (or override ``id()`` when several instances
    may be registered at once) and implement ``match()`` and ``action()``.
    The registry keys hooks by ``id()``; registering a second hook with
    the same id replaces the first.
    """

    name: str = "base_hook"

    def id(self) -> str:
        """Registry key of this hook."""
        return self.name

    @abstractmethod
    def match(self, level: Level, message: str, format: str, args: tuple) -> bool:
        """Whether ``action()`` should run for this message.

        Args:
            level: Level the message was emitted at.
            message: Rendered message, without prefix or newline added.
            format: The format string as passed by the caller.
            args: Arguments after lazy resolution.
        """
        ...

    @abstractmethod
    def action(self, level: Level, message: str, format: str, args: tuple) -> None:
        """Side effect for a matched message. Exceptions reach the caller."""
        ...


class ThresholdHook(Hook):
    """Hook matching every message at or above ``min_level``."""

    name = "threshold_hook"

    def __init__(self, min_level: Level = Level.ERROR):
        self.min_level = Level(min_level)

    def match(self, level: Level, message: str, format: str, args: tuple) -> bool:
        return level >= self.min_level


class BufferHook(Hook):
    """Copies messages of exactly one level into a text buffer.

    Several buffer hooks can live on the same console as long as their
    ``n`` differs, since ``n`` is part of the id.
    """

    name = "buffer_hook"

    def __init__(self, level: Level, buffer: io.StringIO | None = None, n: int = 0):
        self.level = Level(level)
        self.buffer = buffer if buffer is not None else io.StringIO()
        self.n = n

    def id(self) -> str:
        return f"{self.name}-{self.n}"

    def match(self, level: Level, message: str, format: str, args: tuple) -> bool:
        return level == self.level

    def action(self, level: Level, message: str, format: str, args: tuple) -> None:
        self.buffer.write(message)

    def getvalue(self) -> str:
        return self.buffer.getvalue()


class CallbackHook(ThresholdHook):
    """Calls ``callback(level, message)`` for messages at or above ``min_level``.

    Usage::

        alerts = CallbackHook("pager", send_page, min_level=Level.PANIC)
        console.add(alerts)
    """

    def __init__(self, hook_id: str, callback: Callable[[Level, str], Any],
                 min_level: Level = Level.ERROR):
        super().__init__(min_level)
        self.name = hook_id
        self.callback = callback

    def action(self, level: Level, message: str, format: str, args: tuple) -> None:
        self.callback(level, message)
