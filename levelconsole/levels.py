"""Severity levels and their display descriptors.

Levels are totally ordered; the console gate compares them directly.
Each level owns a fixed-width label and the name of the theme style
used to colorize it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from .themes import ColorSystem, LevelTheme
from .utils import colorize


class Level(IntEnum):
    """Log severity, lowest first."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    PANIC = 5

    @property
    def desc(self) -> LevelDesc:
        return LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> Level:
        """Look up a level by name, case-insensitively.

        ``warning`` is accepted as an alias for WARN.
        """
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            available = ', '.join(level.name.lower() for level in cls)
            raise ValueError(
                f"Unknown level: {name!r}. Available: {available}"
            ) from exc

    @classmethod
    def from_python_level(cls, levelno: int) -> Level:
        """Translate a :mod:`logging` level number."""
        if levelno < logging.DEBUG:
            return cls.TRACE
        if levelno < logging.INFO:
            return cls.DEBUG
        if levelno < logging.WARNING:
            return cls.INFO
        if levelno < logging.ERROR:
            return cls.WARN
        if levelno < logging.CRITICAL:
            return cls.ERROR
        return cls.PANIC


@dataclass(frozen=True)
class LevelDesc:
    """Display descriptor for a single level."""
    label: str
    style: str

    def render(self, color: bool = False,
               color_system: ColorSystem = ColorSystem.STANDARD) -> str:
        if not color:
            return self.label
        return colorize(self.label, self.style, color_system.rich)


LEVELS: dict[Level, LevelDesc] = {
    Level.TRACE: LevelDesc("TRACE", LevelTheme.TRACE_STYLE),
    Level.DEBUG: LevelDesc("DEBUG", LevelTheme.DEBUG_STYLE),
    Level.INFO: LevelDesc("INFO ", LevelTheme.INFO_STYLE),
    Level.WARN: LevelDesc("WARN ", LevelTheme.WARN_STYLE),
    Level.ERROR: LevelDesc("ERROR", LevelTheme.ERROR_STYLE),
    Level.PANIC: LevelDesc("PANIC", LevelTheme.PANIC_STYLE),
}


def label(level: Level, color: bool = False,
          color_system: ColorSystem = ColorSystem.STANDARD) -> str:
    """Return the fixed-width label for ``level``, colorized if asked."""
    return LEVELS[Level(level)].render(color, color_system)
