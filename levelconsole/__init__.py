from .levels import Level, LevelDesc, LEVELS, label
from .themes import LevelTheme
from .config import ConsoleConfig, ConfigError, DateFormat, FileFormat, ColorSystem
from .args import Arg, Literal, Lazy
from .hooks import Hook, ThresholdHook, BufferHook, CallbackHook, HookRegistry
from .sinks import Sink, StreamSink, BufferSink, NullSink, as_sink
from .lconsole import Console
from .handler import ConsoleHandler
from .default import (
    get_console, set_console, set_default_config,
    trace, debug, info, warn, error, panic,
)

__all__ = [
    "Console",
    "ConsoleConfig",
    "ConfigError",
    "DateFormat",
    "FileFormat",
    "ColorSystem",
    "Level",
    "LevelDesc",
    "LEVELS",
    "label",
    "LevelTheme",
    "Arg",
    "Literal",
    "Lazy",
    "Hook",
    "ThresholdHook",
    "BufferHook",
    "CallbackHook",
    "HookRegistry",
    "Sink",
    "StreamSink",
    "BufferSink",
    "NullSink",
    "as_sink",
    "ConsoleHandler",
    "get_console",
    "set_console",
    "set_default_config",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "panic",
]
