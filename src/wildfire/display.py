"""Terminal rendering of the forest.

This module provides the TerminalDisplay class which redraws the whole grid
on a text stream once per simulation cycle.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

import numpy as np

from .config import BORDER_GLYPH, STATE_GLYPHS
from .forest import Forest

# ANSI: clear screen, move cursor to the top left corner
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

_GLYPH_TABLE = np.array([STATE_GLYPHS[state] for state in sorted(STATE_GLYPHS)])


class Display(Protocol):
    """Anything that can show a forest snapshot."""

    def show(self, forest: Forest) -> None: ...


def render_forest(forest: Forest) -> str:
    """
    Render the forest as text, one line per grid row.

    Each row is wrapped in border characters, e.g. ``|TT#%X |``.
    """
    lines = []
    for row in forest.as_rows():
        lines.append(BORDER_GLYPH + "".join(_GLYPH_TABLE[row]) + BORDER_GLYPH + "\n")
    return "".join(lines)


class TerminalDisplay:
    """Clears the terminal and draws the full grid on every call.

    Attributes:
        stream: Text stream the grid is written to.
        clear: Whether to emit the clear-screen sequence before each frame.
    """

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames = 0

    def show(self, forest: Forest) -> None:
        frame = render_forest(forest)
        if self.clear:
            frame = CLEAR_SCREEN + frame
        self.stream.write(frame)
        self.stream.flush()
        self.frames += 1


class NullDisplay:
    """Display that draws nothing, for headless runs."""

    def show(self, forest: Forest) -> None:
        pass
