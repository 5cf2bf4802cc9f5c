from enum import Enum

from rich.color import ColorSystem as RichColorSystem
from rich.style import Style
from rich.theme import Theme


class LevelTheme(Theme):
    """
    Style palette for console log lines.

    Every style here maps onto the 16-color ANSI set so that output
    rendered with the standard color system matches what terminals and
    CI log viewers show for the usual bright foreground codes.

    :ivar BLUE: Bright blue used for TRACE labels.
    :type BLUE: str
    :ivar CYAN: Bright cyan used for DEBUG labels.
    :type CYAN: str
    :ivar GREEN: Bright green used for INFO labels.
    :type GREEN: str
    :ivar YELLOW: Bright yellow used for WARN labels.
    :type YELLOW: str
    :ivar RED: Bright red used for ERROR labels.
    :type RED: str
    :ivar MAGENTA: Bright magenta used for PANIC labels.
    :type MAGENTA: str
    :ivar WHITE: Plain white used for the date segment.
    :type WHITE: str
    :ivar GREY: Dim grey used for the ``[file:line]`` segment.
    :type GREY: str
    """
    BLUE = 'bright_blue'
    CYAN = 'bright_cyan'
    GREEN = 'bright_green'
    YELLOW = 'bright_yellow'
    RED = 'bright_red'
    MAGENTA = 'bright_magenta'
    WHITE = 'white'
    GREY = 'bright_black'

    # Style names looked up by levels.py and config.py
    TRACE_STYLE = "level.trace"
    DEBUG_STYLE = "level.debug"
    INFO_STYLE = "level.info"
    WARN_STYLE = "level.warn"
    ERROR_STYLE = "level.error"
    PANIC_STYLE = "level.panic"
    DATE_STYLE = "date"
    FILELINE_STYLE = "fileline"

    def __init__(self):
        super().__init__({
            # Level labels and level-colored prefixes
            self.TRACE_STYLE: Style(color=self.BLUE),
            self.DEBUG_STYLE: Style(color=self.CYAN),
            self.INFO_STYLE: Style(color=self.GREEN),
            self.WARN_STYLE: Style(color=self.YELLOW),
            self.ERROR_STYLE: Style(color=self.RED),
            self.PANIC_STYLE: Style(color=self.MAGENTA),

            # Line segments
            self.DATE_STYLE: Style(color=self.WHITE),
            self.FILELINE_STYLE: Style(color=self.GREY),
        }, inherit=False)


class ColorSystem(Enum):
    """Color system used to render ANSI codes."""
    STANDARD = "standard"
    COLOR_256 = "256"
    TRUECOLOR = "truecolor"
    WINDOWS = "windows"

    @property
    def rich(self) -> RichColorSystem:
        return _RICH_COLOR_SYSTEMS[self]


_RICH_COLOR_SYSTEMS = {
    ColorSystem.STANDARD: RichColorSystem.STANDARD,
    ColorSystem.COLOR_256: RichColorSystem.EIGHT_BIT,
    ColorSystem.TRUECOLOR: RichColorSystem.TRUECOLOR,
    ColorSystem.WINDOWS: RichColorSystem.WINDOWS,
}

DEFAULT_THEME = LevelTheme()
