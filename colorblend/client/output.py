#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Terminal rendering for the colorblend CLI.

Commands describe what they print (a mode, a color, a heading) and
this module decides how it looks. Styling is 24-bit ANSI and is turned
off for NO_COLOR, dumb terminals and anything that isn't a TTY.
"""

import os
import re
import sys
from enum import Enum, auto

from colorblend.color import to_html
from colorblend.types import BlendFunc, BlendKind, RGBA
from colorblend.util import from_unit


class _Style(Enum):
    """What a piece of text is, independent of how it is drawn."""

    MODE = auto()
    LABEL = auto()
    CHANNELS = auto()
    HEADING = auto()
    FAILURE = auto()
    DIM = auto()


# Foreground color per style, None for bold-only
_PALETTE: dict[_Style, RGBA | None] = {
    _Style.MODE: RGBA(128, 255, 234),
    _Style.LABEL: RGBA(128, 255, 234),
    _Style.CHANNELS: RGBA(225, 53, 255),
    _Style.HEADING: None,
    _Style.FAILURE: RGBA(255, 99, 99),
    _Style.DIM: RGBA(128, 128, 128),
}

_BOLD = frozenset((_Style.MODE, _Style.HEADING))

CROSS = "✗"
PIPE = "│"
BLOCK = "█"

LABEL_WIDTH = 8

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return _ESCAPE.sub("", str(text))


def _color_enabled(force: bool | None) -> bool:
    if force is not None:
        return force
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if not getattr(sys.stdout, "isatty", None) or not sys.stdout.isatty():
        return False
    return os.environ.get("TERM") != "dumb"


class Output:
    """
    Renders CLI text, optionally with color.

    :param force_color: True or False to override terminal detection
    """

    def __init__(self, force_color: bool | None = None):
        self._color = _color_enabled(force_color)

    @property
    def color_enabled(self) -> bool:
        return self._color

    def _paint(self, style: _Style, text: str) -> str:
        if not self._color:
            return text

        codes = []
        if style in _BOLD:
            codes.append("1")
        fg = _PALETTE[style]
        if fg is not None:
            codes.append(f"38;2;{fg.r};{fg.g};{fg.b}")

        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"

    def mode(self, name: str) -> str:
        return self._paint(_Style.MODE, name)

    def label(self, text: str) -> str:
        return self._paint(_Style.LABEL, text)

    def heading(self, text: str) -> str:
        return self._paint(_Style.HEADING, text)

    def dim(self, text: str) -> str:
        return self._paint(_Style.DIM, text)

    def error(self, message: str) -> str:
        """Format an error message behind a cross."""
        return f"{self._paint(_Style.FAILURE, CROSS)} {message}"

    def swatch(self, color: RGBA, width: int = 4) -> str:
        """
        A block drawn in the given 0-255 color, empty without color support
        """
        if not self._color:
            return ""
        return f"\x1b[38;2;{color.r};{color.g};{color.b}m{BLOCK * width}\x1b[0m"

    def row(self, label: str, text: str) -> str:
        """A right-aligned label and its value, split by a bar."""
        pad = " " * (LABEL_WIDTH - len(label))
        return f" {pad}{self.label(label)} {PIPE} {text}"

    def color_row(self, label: str, color: RGBA, unit: bool = False) -> str:
        """
        Render a color as a labelled row of its channels and hex code

        :param label: Row label
        :param color: The color
        :param unit: True if the color channels are 0.0 - 1.0
        """
        if unit:
            shown = [f"{c:.4g}" for c in color.rgb]
            rgb = RGBA(*(from_unit(c) for c in color.rgb))
        else:
            shown = [str(round(c)) for c in color.rgb]
            rgb = RGBA(*(round(c) for c in color.rgb))

        channels = self._paint(_Style.CHANNELS, f"({', '.join(shown)}, {color.a:.4g})")
        text = f"{channels} {self.dim(to_html(color, unit))}"

        swatch = self.swatch(rgb)
        if swatch:
            text = f"{swatch} {text}"

        return self.row(label, text)

    def mode_entry(self, func: BlendFunc, width: int) -> str:
        """Render a blend mode with its kind, and mark the extended ones."""
        kind = "separable" if func.kind is BlendKind.SEPARABLE else "non-separable"
        line = f"  {self.mode(func.name.ljust(width))}  {self.dim(kind)}"
        if not func.standard:
            line += f" {self.dim('(extended)')}"
        return line
