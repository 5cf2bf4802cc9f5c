"""Log call arguments and message rendering.

Arguments are passed to a log call as-is, or wrapped to make their
evaluation explicit:

    console.debug("tree: %s", Lazy(node.dump))   # dump() runs only if DEBUG is on
    console.info("raw: %s", Literal(callback))   # callback itself is formatted

Plain callables are never invoked; only ``Lazy`` defers work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any


class Arg(ABC):
    """An argument whose value is produced when the message is rendered."""

    @abstractmethod
    def resolve(self) -> Any:
        ...


class Literal(Arg):
    """Wraps a value that is passed through unchanged."""

    __slots__ = ('value',)

    def __init__(self, value: Any):
        self.value = value

    def resolve(self) -> Any:
        return self.value

    def __repr__(self):
        return f"Literal({self.value!r})"


class Lazy(Arg):
    """Wraps a zero-argument function evaluated only for emitted messages."""

    __slots__ = ('fn',)

    def __init__(self, fn: Callable[[], Any]):
        if not callable(fn):
            raise TypeError(f"Lazy expects a callable, got {type(fn).__name__}")
        self.fn = fn

    def resolve(self) -> Any:
        return self.fn()

    def __repr__(self):
        return f"Lazy({self.fn!r})"


def resolve_args(args: tuple) -> tuple:
    """Replace every ``Arg`` wrapper with its value, in order."""
    return tuple(arg.resolve() if isinstance(arg, Arg) else arg for arg in args)


def render_message(format: str, args: tuple) -> str:
    """Apply ``args`` to a printf-style ``format``.

    A single non-empty mapping argument is used for ``%(name)s`` lookups,
    as :mod:`logging` does. With no arguments the format is returned
    untouched. A format/argument mismatch does not raise: the format is
    returned followed by the arguments' reprs.
    """
    if not args:
        return str(format)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    else:
        values = args
    try:
        return str(format) % values
    except (TypeError, ValueError, KeyError, OverflowError):
        extra = ', '.join(repr(arg) for arg in args)
        return f"{format} %!(BADARGS {extra})"
