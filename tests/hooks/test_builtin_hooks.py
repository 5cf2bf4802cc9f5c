"""Tests for levelconsole/hooks/hook.py — builtin hooks."""

import io

import pytest

from levelconsole.hooks import BufferHook, CallbackHook, Hook, ThresholdHook
from levelconsole.levels import Level


class TestBufferHook:

    def test_matches_exact_level_only(self):
        hook = BufferHook(Level.WARN)
        assert hook.match(Level.WARN, "m", "m", ())
        assert not hook.match(Level.ERROR, "m", "m", ())
        assert not hook.match(Level.INFO, "m", "m", ())

    def test_action_writes_message(self):
        buffer = io.StringIO()
        hook = BufferHook(Level.WARN, buffer)
        hook.action(Level.WARN, "first", "first", ())
        hook.action(Level.WARN, "second", "second", ())
        assert buffer.getvalue() == "firstsecond"
        assert hook.getvalue() == "firstsecond"

    def test_id_includes_number(self):
        assert BufferHook(Level.INFO, n=1).id() != BufferHook(Level.INFO, n=2).id()


class TestCallbackHook:

    def test_threshold_match(self):
        hook = CallbackHook("alerts", lambda level, message: None, min_level=Level.ERROR)
        assert not hook.match(Level.WARN, "m", "m", ())
        assert hook.match(Level.ERROR, "m", "m", ())
        assert hook.match(Level.PANIC, "m", "m", ())

    def test_callback_receives_level_and_message(self):
        seen = []
        hook = CallbackHook("alerts", lambda level, message: seen.append((level, message)))
        hook.action(Level.ERROR, "disk full", "disk %s", ("full",))
        assert seen == [(Level.ERROR, "disk full")]

    def test_id_is_given_name(self):
        assert CallbackHook("pager", print).id() == "pager"


class TestHookBase:

    def test_hook_is_abstract(self):
        with pytest.raises(TypeError):
            Hook()

    def test_threshold_hook_needs_action(self):
        with pytest.raises(TypeError):
            ThresholdHook()
