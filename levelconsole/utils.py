import os
import sys
from functools import lru_cache

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from .themes import DEFAULT_THEME


@lru_cache(maxsize=None)
def _resolve_style(style: str) -> Style:
    if style in DEFAULT_THEME.styles:
        return DEFAULT_THEME.styles[style]
    try:
        return Style.parse(style)
    except StyleSyntaxError as exc:
        raise ValueError(f"Unknown style: {style!r}") from exc


def colorize(text: str, style: str,
             color_system: ColorSystem | None = ColorSystem.STANDARD) -> str:
    """Wrap ``text`` in the ANSI codes for ``style``.

    ``style`` is a theme style name (``level.warn``) or any rich style
    definition (``bold red``). With no color system the text comes back
    unchanged.
    """
    if color_system is None:
        return text
    return _resolve_style(style).render(text, color_system=color_system)


def caller_location(skip: int = 0) -> tuple[str, int]:
    """Return ``(filename, lineno)`` of a frame on the current stack.

    ``skip=0`` is the function calling ``caller_location``; every extra
    unit walks one frame further out.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


def short_path(name: str) -> str:
    """Trim a path to ``<parent-dir>/<file>``."""
    parent, base = os.path.split(name)
    parent = os.path.basename(parent)
    if not parent:
        return base
    return parent + os.sep + base
