"""Console format configuration.

``ConsoleConfig`` holds the user-facing display options and a compiled
form of them: the date and file formatters and a ``str.format`` line
template built once per configuration, plus the rendered label and
prefix for every level. ``compile()`` rebuilds the compiled form; it
runs on construction and must be called again by anyone mutating the
display fields afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .levels import LEVELS, Level
from .themes import ColorSystem, LevelTheme
from .utils import colorize, short_path

ENV_PREFIX = "LEVELCONSOLE_"


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


class DateFormat(Enum):
    """Date segment display options."""
    HIDE = "hide"
    HOUR = "hour"    # 15:04:05
    FULL = "full"    # 2006/01/02 15:04:05


class FileFormat(Enum):
    """Caller file segment display options."""
    HIDE = "hide"
    SHORT = "short"  # parent-dir/file.py
    FULL = "full"    # path as reported by the interpreter


_DATE_PATTERNS = {
    DateFormat.HOUR: "%H:%M:%S",
    DateFormat.FULL: "%Y/%m/%d %H:%M:%S",
}


def date_formatter(mode: DateFormat, tz: tzinfo | None = None) -> Callable[[datetime], str] | None:
    """Compile a date display mode into a formatting function.

    :param mode: The date display mode.
    :param tz: Zone the timestamp is converted to before formatting.
        ``None`` keeps the timestamp as given.
    :returns: ``None`` for ``DateFormat.HIDE``, otherwise a function
        turning a ``datetime`` into the segment text.
    :raises ConfigError: If ``mode`` is not a ``DateFormat`` member.
    """
    if mode is DateFormat.HIDE:
        return None
    if mode not in _DATE_PATTERNS:
        raise ConfigError(f"Invalid date format: {mode!r}")
    pattern = _DATE_PATTERNS[mode]
    if tz is None:
        return lambda t: t.strftime(pattern)
    return lambda t: t.astimezone(tz).strftime(pattern)


def file_formatter(mode: FileFormat) -> Callable[[str], str] | None:
    """Compile a file display mode into a path formatting function.

    :param mode: The file display mode.
    :returns: ``None`` for ``FileFormat.HIDE``, a ``parent/file`` trimmer
        for ``SHORT`` and the identity for ``FULL``.
    :raises ConfigError: If ``mode`` is not a ``FileFormat`` member.
    """
    if mode is FileFormat.HIDE:
        return None
    if mode is FileFormat.SHORT:
        return short_path
    if mode is FileFormat.FULL:
        return lambda name: name
    raise ConfigError(f"Invalid file format: {mode!r}")


def _coerce_enum(enum_cls, value, field_name: str):
    """Accept a member, a member value or a member name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip()
        for member in enum_cls:
            if normalized.lower() in (str(member.value).lower(), member.name.lower()):
                return member
    available = ', '.join(str(member.value) for member in enum_cls)
    raise ConfigError(
        f"Invalid value for '{field_name}': expected one of {available}, got {value!r}."
    )


def _coerce_level(value) -> Level:
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        try:
            return Level.from_name(value)
        except ValueError as exc:
            raise ConfigError(f"Invalid value for 'level': {exc}") from exc
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError as exc:
            raise ConfigError(
                f"Invalid value for 'level': expected 0..{len(Level) - 1}, got {value!r}."
            ) from exc
    raise ConfigError(f"Invalid value for 'level': got {type(value).__name__} ({value!r}).")


def _load_timezone(key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Invalid value for 'timezone': {key!r}") from exc


def _parse_bool(raw_value: str, env_name: str) -> bool:
    normalized = raw_value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ConfigError(
        f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
    )


@dataclass
class ConsoleConfig:
    """
    Display configuration for a Console.

    :ivar level: Minimum level emitted; anything lower is dropped before
        its arguments are evaluated.
    :ivar date: Date segment display mode.
    :ivar file: Caller file segment display mode.
    :ivar color: Whether labels and segments are ANSI colored.
    :ivar prefix: Free text written between the label and the message.
    :ivar color_system: ANSI palette used when ``color`` is on.
    :ivar timezone: Zone key for timestamps; ``None`` means local time.
    """
    level: Level = Level.TRACE
    date: DateFormat = DateFormat.HIDE
    file: FileFormat = FileFormat.HIDE
    color: bool = False
    prefix: str = ""
    color_system: ColorSystem = ColorSystem.STANDARD
    timezone: str | None = None

    # Compiled state, rebuilt by compile()
    _date_fn: Callable[[datetime], str] | None = field(default=None, init=False, repr=False, compare=False)
    _file_fn: Callable[[str], str] | None = field(default=None, init=False, repr=False, compare=False)
    _template: str = field(default="", init=False, repr=False, compare=False)
    _labels: dict = field(default_factory=dict, init=False, repr=False, compare=False)
    _prefixes: dict = field(default_factory=dict, init=False, repr=False, compare=False)
    _tz: tzinfo | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.compile()

    @classmethod
    def standard(cls) -> ConsoleConfig:
        """Baseline configuration of the default console."""
        return cls(color=True, date=DateFormat.HOUR, file=FileFormat.SHORT)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None,
                 base: ConsoleConfig | None = None) -> ConsoleConfig:
        """Apply ``LEVELCONSOLE_*`` environment overrides on top of ``base``.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``.
            base: Starting configuration; defaults to ``ConsoleConfig()``.

        Raises:
            ConfigError: If an override cannot be parsed. The message
                names the offending variable.
        """
        environ = os.environ if environ is None else environ
        values = {}
        if base is not None:
            values = {
                'level': base.level, 'date': base.date, 'file': base.file,
                'color': base.color, 'prefix': base.prefix,
                'color_system': base.color_system, 'timezone': base.timezone,
            }

        coercers = {
            'level': _coerce_level,
            'date': lambda raw: _coerce_enum(DateFormat, raw, 'date'),
            'file': lambda raw: _coerce_enum(FileFormat, raw, 'file'),
            'color_system': lambda raw: _coerce_enum(ColorSystem, raw, 'color_system'),
            'timezone': lambda raw: _load_timezone(raw).key,
        }
        for field_name, coerce in coercers.items():
            env_name = ENV_PREFIX + field_name.upper()
            raw_value = environ.get(env_name)
            if raw_value is None:
                continue
            if not raw_value.strip():
                raise ConfigError(
                    f"Invalid environment override '{env_name}': expected non-empty string."
                )
            try:
                values[field_name] = coerce(raw_value.strip())
            except ConfigError as exc:
                raise ConfigError(f"Invalid environment override '{env_name}': {exc}") from exc

        raw_color = environ.get(ENV_PREFIX + "COLOR")
        if raw_color is not None:
            values['color'] = _parse_bool(raw_color, ENV_PREFIX + "COLOR")

        raw_prefix = environ.get(ENV_PREFIX + "PREFIX")
        if raw_prefix is not None:
            values['prefix'] = raw_prefix

        return cls(**values)

    def compile(self) -> ConsoleConfig:
        """Validate the display fields and rebuild the compiled state.

        Raises:
            ConfigError: If any field holds an out-of-range value.
        """
        self.level = _coerce_level(self.level)
        self.date = _coerce_enum(DateFormat, self.date, 'date')
        self.file = _coerce_enum(FileFormat, self.file, 'file')
        self.color_system = _coerce_enum(ColorSystem, self.color_system, 'color_system')
        if not isinstance(self.prefix, str):
            raise ConfigError(f"Invalid value for 'prefix': expected str, got {self.prefix!r}.")
        self.color = bool(self.color)

        self._tz = None
        if self.timezone:
            self._tz = _load_timezone(self.timezone)

        self._date_fn = date_formatter(self.date, self._tz)
        self._file_fn = file_formatter(self.file)
        self._labels = {level: self._paint(desc.label, desc.style) for level, desc in LEVELS.items()}
        self._prefixes = {level: self._paint(self.prefix, desc.style) for level, desc in LEVELS.items()}
        self._template = self._build_template()
        return self

    def _paint(self, text: str, style: str) -> str:
        if not self.color or not text:
            return text
        return colorize(text, style, self.color_system.rich)

    def _build_template(self) -> str:
        # Placeholders are painted here; values are substituted per call.
        parts = []
        if self._date_fn is not None:
            parts.append(self._paint("{date}", LevelTheme.DATE_STYLE))
        parts.append("{label}")
        if self._file_fn is not None:
            parts.append(self._paint("[{file}:{line}]", LevelTheme.FILELINE_STYLE))
        if self.prefix:
            parts.append("{prefix}")
        parts.append("{message}")
        return " ".join(parts)

    @property
    def shows_file(self) -> bool:
        return self._file_fn is not None

    def label(self, level: Level) -> str:
        """Rendered label for ``level`` under this configuration."""
        return self._labels[level]

    def with_prefix(self, prefix: str) -> ConsoleConfig:
        """Copy of this configuration carrying ``prefix``, compiled."""
        return replace(self, prefix=prefix)

    def format_line(self, level: Level, message: str, now: datetime | None = None,
                    location: tuple[str, int] | None = None) -> str:
        """Assemble one output line, newline included.

        Args:
            level: Level of the message; selects label and prefix color.
            message: Rendered message text.
            now: Timestamp for the date segment; defaults to the current
                time. Ignored when the date segment is hidden.
            location: ``(filename, lineno)`` for the file segment. Ignored
                when the file segment is hidden.
        """
        values = {'label': self._labels[level], 'message': message}
        if self._date_fn is not None:
            values['date'] = self._date_fn(now if now is not None else datetime.now())
        if self._file_fn is not None:
            filename, lineno = location if location is not None else ("???", 0)
            values['file'] = self._file_fn(filename)
            values['line'] = lineno
        if self.prefix:
            values['prefix'] = self._prefixes[level]
        line = self._template.format(**values)
        if not message.endswith("\n"):
            line += "\n"
        return line
