"""Bridge from the standard :mod:`logging` module to a Console."""

from __future__ import annotations

import logging

from .levels import Level
from .lconsole import Console


class ConsoleHandler(logging.Handler):
    """``logging.Handler`` writing records through a Console.

    Records keep their own origin: the file segment shows
    ``record.pathname:record.lineno`` rather than the handler's frame.
    The console's level gate still applies after the handler's own.

    Usage::

        logging.getLogger("app").addHandler(ConsoleHandler(console))
    """

    def __init__(self, console: Console | None = None, level: int = logging.NOTSET):
        """
        Args:
            console: Target console. ``None`` resolves the default console
                at emit time, so later ``set_console()`` calls apply.
            level: Handler threshold, in :mod:`logging` numbers.
        """
        super().__init__(level)
        self.console = console

    def _target(self) -> Console:
        if self.console is not None:
            return self.console
        from .default import get_console
        return get_console()

    def emit(self, record: logging.LogRecord):
        try:
            level = Level.from_python_level(record.levelno)
            console = self._target()
            if not console.enabled(level):
                return
            text = self.format(record)
            console.output_at((record.pathname, record.lineno), level, text)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
