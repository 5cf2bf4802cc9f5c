"""
Process-wide default console and the module-level logging functions.

Applications that pass their own ``Console`` around do not need this
module. For scripts, ``info()`` and friends write through a default
console that is created on first use with ``ConsoleConfig.standard()``
on stdout, or that the application installs at startup:

    set_console(Console(ConsoleConfig.from_env(), sys.stderr))
    info("ready")

Installing a console and replacing its configuration are both
synchronized; the logging functions read the current console without
locking and then rely on the console's own lock.
"""

from __future__ import annotations

import threading

from .config import ConsoleConfig
from .levels import Level
from .lconsole import Console

_console: Console | None = None
_console_lock = threading.Lock()


def get_console() -> Console:
    """Get the default console, creating the standard one if needed."""
    global _console
    console = _console
    if console is not None:
        return console
    with _console_lock:
        if _console is None:
            _console = Console.standard()
        return _console


def set_console(console: Console | None) -> Console | None:
    """Install ``console`` as the default; returns the previous one.

    Passing ``None`` resets to the lazily created standard console.
    """
    global _console
    with _console_lock:
        previous, _console = _console, console
    return previous


def set_default_config(cfg: ConsoleConfig):
    """Replace the default console's configuration for all later calls."""
    global _console
    with _console_lock:
        if _console is None:
            _console = Console(cfg)
        else:
            _console.reconfigure(cfg)


def trace(format: str, *args):
    get_console().output(1, Level.TRACE, format, *args)


def debug(format: str, *args):
    get_console().output(1, Level.DEBUG, format, *args)


def info(format: str, *args):
    get_console().output(1, Level.INFO, format, *args)


def warn(format: str, *args):
    get_console().output(1, Level.WARN, format, *args)


def error(format: str, *args):
    get_console().output(1, Level.ERROR, format, *args)


def panic(format: str, *args):
    get_console().output(1, Level.PANIC, format, *args)
