"""Console: the leveled, hook-extensible line writer.

Every leveled call runs the same pipeline::

    gate -> resolve lazy args -> render -> [lock: dispatch hooks -> write]

Messages below the configured level return before any argument is
evaluated. Everything that touches shared state (the hook registry and
the sink) runs under one lock, shared with every clone of the console,
so lines are never interleaved on the sink.
"""

from __future__ import annotations

import sys
import threading

from .args import render_message, resolve_args
from .config import ConsoleConfig
from .hooks import Hook, HookRegistry
from .levels import Level
from .sinks import Sink, as_sink
from .utils import caller_location


class Console:
    """
    A leveled console writing formatted lines to a sink.

    Consoles are cheap; an application usually builds one at startup and
    derives per-component consoles from it with ``clone()``, each carrying
    its own prefix.

    Usage::

        console = Console(ConsoleConfig(level=Level.INFO, color=True))
        console.info("listening on %s:%d", host, port)
        console.debug("state: %s", Lazy(dump_state))  # never evaluated at INFO

        db = console.clone("[db]")
        db.warn("slow query (%.1fs)", elapsed)

    Hooks attached with ``add()`` see every emitted message before it is
    written. They run on the emitting thread while the console lock is
    held, so a hook that blocks stalls every producer on the same sink,
    and a hook that logs through the same console deadlocks.

    :ivar _cfg: Display configuration; replaced wholesale, never mutated.
    :vartype _cfg: ConsoleConfig
    :ivar _sink: Destination of formatted lines.
    :vartype _sink: Sink
    :ivar _hooks: Registry of hooks matched against every message.
    :vartype _hooks: HookRegistry
    :ivar _lock: Guards the sink and the hook registry. Shared by clones.
    :vartype _lock: threading.Lock
    """

    def __init__(self, cfg: ConsoleConfig | None = None, sink=None, *,
                 hooks: HookRegistry | None = None):
        """
        :param cfg: Display configuration. Defaults to ``ConsoleConfig()``.
        :param sink: A ``Sink`` or any object with a ``write`` method.
            Defaults to ``sys.stdout``.
        :param hooks: Registry to use. Its lock becomes the console lock.
            Defaults to a new, empty registry.
        :raises TypeError: If ``sink`` cannot be written to.
        """
        self._cfg = cfg if cfg is not None else ConsoleConfig()
        self._sink: Sink = as_sink(sink if sink is not None else sys.stdout)
        self._hooks = hooks if hooks is not None else HookRegistry()
        self._lock = self._hooks.lock
        self._dropped_writes = 0

    @classmethod
    def standard(cls, sink=None) -> Console:
        """Console with the baseline configuration, on stdout by default."""
        return cls(ConsoleConfig.standard(), sink)

    @property
    def config(self) -> ConsoleConfig:
        return self._cfg

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def dropped_writes(self) -> int:
        """Number of lines the sink failed to accept."""
        return self._dropped_writes

    def reconfigure(self, cfg: ConsoleConfig):
        """Replace the configuration. Calls in flight keep the old one."""
        with self._lock:
            self._cfg = cfg

    def enabled(self, level: Level) -> bool:
        """Whether a message at ``level`` would pass the gate."""
        return self._cfg.level <= level

    # ---- Hooks ----

    def add(self, hook: Hook):
        """Attach a hook; a hook with the same id is replaced."""
        self._hooks.add(hook)

    def release(self, hook: Hook | str):
        """Detach a hook by instance or id. Unknown hooks are ignored."""
        self._hooks.release(hook)

    # ---- Clones ----

    def clone(self, prefix: str) -> Console:
        """Derive a console with ``prefix`` and its own copy of the hooks.

        The clone writes to the same sink under the same lock. Hooks added
        to or released from either console afterwards do not affect the
        other.
        """
        return Console(self._cfg.with_prefix(prefix), self._sink,
                       hooks=self._hooks.copy())

    def clone_shared(self, prefix: str) -> Console:
        """Derive a console with ``prefix`` that shares the hook registry.

        Adding or releasing a hook on either console is seen by both.
        """
        return Console(self._cfg.with_prefix(prefix), self._sink,
                       hooks=self._hooks)

    # ---- Emission ----

    def output(self, depth: int, level: Level, format: str, *args):
        """Emit a message at ``level``.

        :param depth: Frames between the logical caller and the caller of
            ``output``. ``0`` reports the line calling ``output``; wrappers
            add one per forwarding layer.
        :param level: Message level.
        :param format: printf-style format string.
        :param args: Format arguments; ``Lazy`` ones are evaluated only if
            the message passes the gate.
        """
        cfg = self._cfg
        if cfg.level > level:
            return
        location = caller_location(depth + 1) if cfg.shows_file else None
        self._emit(cfg, level, format, args, location)

    def output_at(self, location: tuple[str, int], level: Level, format: str, *args):
        """Emit a message reporting an explicit ``(filename, lineno)``."""
        cfg = self._cfg
        if cfg.level > level:
            return
        self._emit(cfg, level, format, args, location)

    def trace(self, format: str, *args):
        self.output(1, Level.TRACE, format, *args)

    def debug(self, format: str, *args):
        self.output(1, Level.DEBUG, format, *args)

    def info(self, format: str, *args):
        self.output(1, Level.INFO, format, *args)

    def warn(self, format: str, *args):
        self.output(1, Level.WARN, format, *args)

    def error(self, format: str, *args):
        self.output(1, Level.ERROR, format, *args)

    def panic(self, format: str, *args):
        self.output(1, Level.PANIC, format, *args)

    def _emit(self, cfg: ConsoleConfig, level: Level, format: str, args: tuple,
              location: tuple[str, int] | None):
        args = resolve_args(args)
        message = render_message(format, args)
        line = cfg.format_line(level, message, location=location)
        with self._lock:
            self._hooks.dispatch(level, message, format, args)
            self._write(line)

    def _write(self, line: str):
        # Caller holds the lock. Sink failures are counted, not raised.
        try:
            self._sink.write_string(line)
        except (OSError, ValueError):
            self._dropped_writes += 1
