"""Hook registry: the set of hooks attached to a console."""

from __future__ import annotations

import threading

from ..levels import Level
from .hook import Hook


class HookRegistry:
    """Ordered ``id -> hook`` map guarded by a lock.

    Unlike the class-level registries of the wider codebase, a registry
    here is an instance: each console (or family of consoles sharing a
    sink) owns one. The lock is the console's write lock, so adding or
    releasing a hook never overlaps a write or a dispatch.

    ``dispatch()`` does not take the lock; the console calls it from
    inside its own critical section.
    """

    _registry_label: str = "hook"

    def __init__(self, lock: threading.Lock | None = None):
        self.lock = lock if lock is not None else threading.Lock()
        self._items: dict[str, Hook] = {}

    def add(self, hook: Hook):
        """Register ``hook``, replacing any hook with the same id."""
        with self.lock:
            self._items[hook.id()] = hook

    def release(self, hook: Hook | str):
        """Remove a hook by instance or id. Unknown ids are ignored."""
        hook_id = hook if isinstance(hook, str) else hook.id()
        with self.lock:
            self._items.pop(hook_id, None)

    def dispatch(self, level: Level, message: str, format: str, args: tuple):
        """Run ``action()`` on every hook whose ``match()`` accepts the message.

        Hooks run in registration order. The caller must hold ``lock``.
        Exceptions raised by a hook propagate and stop the dispatch.
        """
        for hook in list(self._items.values()):
            if hook.match(level, message, format, args):
                hook.action(level, message, format, args)

    def get(self, hook_id: str) -> Hook:
        """Get a registered hook by id."""
        with self.lock:
            if hook_id not in self._items:
                available = ', '.join(sorted(self._items.keys()))
                raise ValueError(
                    f"Unknown {self._registry_label}: '{hook_id}'. "
                    f"Available: {available}"
                )
            return self._items[hook_id]

    def ids(self) -> list[str]:
        """Registered ids in dispatch order."""
        with self.lock:
            return list(self._items.keys())

    def copy(self, lock: threading.Lock | None = None) -> HookRegistry:
        """Independent registry holding the same hooks, bound to ``lock``."""
        with self.lock:
            items = dict(self._items)
        other = HookRegistry(lock if lock is not None else self.lock)
        other._items = items
        return other

    def __contains__(self, hook) -> bool:
        hook_id = hook if isinstance(hook, str) else hook.id()
        with self.lock:
            return hook_id in self._items

    def __len__(self) -> int:
        with self.lock:
            return len(self._items)
