"""Hook infrastructure: base type, builtin hooks and the registry."""

from .hook import Hook, ThresholdHook, BufferHook, CallbackHook
from .registry import HookRegistry

__all__ = [
    'Hook',
    'ThresholdHook',
    'BufferHook',
    'CallbackHook',
    'HookRegistry',
]
