"""Shared fixtures for levelconsole unit tests."""

import pytest

from levelconsole import BufferSink, Console, ConsoleConfig, Hook, set_console


# ---- Default console: never leak an installed console across tests ----

@pytest.fixture(autouse=True)
def _reset_default_console():
    """Drop whatever default console a test installed.

    The next get_console() call recreates the standard console bound to
    whatever sys.stdout is at that time.
    """
    previous = set_console(None)
    yield
    set_console(previous)


# ---- Sink and console fixtures ----

@pytest.fixture
def sink():
    """Fresh in-memory sink."""
    return BufferSink()


@pytest.fixture
def make_console(sink):
    """Factory building a plain console (no color, no date, no file) on ``sink``."""
    def _make(**cfg_kwargs):
        return Console(ConsoleConfig(**cfg_kwargs), sink)
    return _make


# ---- Recording hook ----

class RecordingHook(Hook):
    """Hook that records every match() and action() call.

    ``accept`` decides the match result: a level, a set of levels, or
    a predicate taking the level.
    """

    def __init__(self, hook_id="recorder", accept=None):
        self.name = hook_id
        self.accept = accept
        self.matched = []
        self.actions = []

    def match(self, level, message, format, args):
        self.matched.append((level, message))
        if self.accept is None:
            return True
        if callable(self.accept):
            return self.accept(level)
        if isinstance(self.accept, (set, frozenset)):
            return level in self.accept
        return level == self.accept

    def action(self, level, message, format, args):
        self.actions.append((level, message, format, args))


@pytest.fixture
def recording_hook():
    return RecordingHook()


@pytest.fixture
def hook_factory():
    """The RecordingHook class, for tests needing several hooks."""
    return RecordingHook
