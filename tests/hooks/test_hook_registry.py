"""Tests for levelconsole/hooks/registry.py — HookRegistry lifecycle and dispatch."""

import threading

import pytest

from levelconsole.hooks.registry import HookRegistry
from levelconsole.levels import Level


class TestHookRegistryLifecycle:

    def test_add_and_release(self, hook_factory):
        registry = HookRegistry()
        hook = hook_factory("h1")
        registry.add(hook)
        assert "h1" in registry
        registry.release(hook)
        assert len(registry) == 0

    def test_add_overwrites_same_id(self, hook_factory):
        registry = HookRegistry()
        first, second = hook_factory("same"), hook_factory("same")
        registry.add(first)
        registry.add(second)
        assert len(registry) == 1
        assert registry.get("same") is second

    def test_release_unknown_is_noop(self, hook_factory):
        registry = HookRegistry()
        registry.add(hook_factory("h1"))
        registry.release(hook_factory("other"))
        assert registry.ids() == ["h1"]

    def test_release_by_id(self, hook_factory):
        registry = HookRegistry()
        registry.add(hook_factory("h1"))
        registry.release("h1")
        assert "h1" not in registry

    def test_get_unknown_lists_available(self, hook_factory):
        registry = HookRegistry()
        registry.add(hook_factory("h1"))
        with pytest.raises(ValueError, match="Available: h1"):
            registry.get("nope")

    def test_ids_in_registration_order(self, hook_factory):
        registry = HookRegistry()
        for name in ("c", "a", "b"):
            registry.add(hook_factory(name))
        assert registry.ids() == ["c", "a", "b"]


class TestHookRegistryDispatch:

    def test_only_matching_hooks_act(self, hook_factory):
        registry = HookRegistry()
        warn_hook = hook_factory("warn", accept=Level.WARN)
        error_hook = hook_factory("error", accept=Level.ERROR)
        registry.add(warn_hook)
        registry.add(error_hook)

        with registry.lock:
            registry.dispatch(Level.WARN, "msg", "msg", ())

        assert len(warn_hook.actions) == 1
        assert error_hook.actions == []
        assert len(error_hook.matched) == 1

    def test_action_receives_all_fields(self, hook_factory):
        registry = HookRegistry()
        hook = hook_factory()
        registry.add(hook)
        with registry.lock:
            registry.dispatch(Level.INFO, "a=1", "a=%d", (1,))
        assert hook.actions == [(Level.INFO, "a=1", "a=%d", (1,))]

    def test_hook_exception_propagates(self):
        from levelconsole.hooks import Hook

        class Exploding(Hook):
            name = "boom"

            def match(self, level, message, format, args):
                return True

            def action(self, level, message, format, args):
                raise RuntimeError("hook failed")

        registry = HookRegistry()
        registry.add(Exploding())
        with pytest.raises(RuntimeError, match="hook failed"):
            registry.dispatch(Level.INFO, "m", "m", ())


class TestHookRegistryCopy:

    def test_copy_is_independent(self, hook_factory):
        registry = HookRegistry()
        registry.add(hook_factory("h1"))
        other = registry.copy()
        other.add(hook_factory("h2"))
        registry.release("h1")
        assert registry.ids() == []
        assert other.ids() == ["h1", "h2"]

    def test_copy_keeps_lock_by_default(self):
        registry = HookRegistry()
        assert registry.copy().lock is registry.lock

    def test_copy_with_explicit_lock(self):
        lock = threading.Lock()
        assert HookRegistry().copy(lock).lock is lock


class TestHookRegistryLocking:

    @pytest.mark.parametrize("lookup", [len, lambda registry: "h1" in registry])
    def test_lookups_wait_for_the_lock(self, hook_factory, lookup):
        """Membership and size are read under the same lock as add/release."""
        registry = HookRegistry()
        registry.add(hook_factory("h1"))
        results = []

        registry.lock.acquire()
        try:
            reader = threading.Thread(target=lambda: results.append(lookup(registry)))
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()
            assert results == []
        finally:
            registry.lock.release()

        reader.join(timeout=5)
        assert not reader.is_alive()
        assert results in ([1], [True])
