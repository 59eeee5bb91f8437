"""ANSI terminal presentation of composited frames.

Turns a :class:`Frame` into escape-sequence text: one SGR color switch per
run of equally colored cells, one line per frame row. The
:class:`TerminalDisplay` writes to any text stream, which keeps it usable
against an in-memory buffer in tests, and skips frames identical to the one
already on screen.
"""

import logging
import sys
from typing import List, Optional, TextIO

from ascii_bros.renderer.compositor import Frame

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET = "\x1b[0m"


def sgr(color: int) -> str:
    """Escape sequence resetting attributes then selecting ``color``."""
    return f"\x1b[0;{color}m"


def row_to_ansi(glyphs: List[str], colors: List[int]) -> str:
    parts: List[str] = []
    current: Optional[int] = None
    for glyph, color in zip(glyphs, colors):
        if color != current:
            parts.append(sgr(color))
            current = color
        parts.append(glyph)
    parts.append(RESET)
    return "".join(parts)


def frame_to_ansi(frame: Frame, clear: bool = True) -> str:
    """Render ``frame`` as terminal text, optionally preceded by clear + home."""
    prefix = CLEAR_SCREEN + CURSOR_HOME + HIDE_CURSOR if clear else CURSOR_HOME
    rows = [
        row_to_ansi(list(glyphs), [int(c) for c in colors])
        for glyphs, colors in zip(frame.glyphs, frame.colors)
    ]
    return prefix + "\n".join(rows)


class TerminalDisplay:
    stream: TextIO

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._last: Optional[Frame] = None

    def present(self, frame: Frame) -> bool:
        """Draw ``frame`` unless it matches what is already shown.

        Returns:
            bool: True if anything was written.
        """
        if self._last is not None and frame.same_as(self._last):
            return False
        resized = self._last is None or (
            self._last.width,
            self._last.height,
        ) != (frame.width, frame.height)
        if resized:
            logger.debug("Redrawing full %dx%d frame", frame.width, frame.height)
        self.stream.write(frame_to_ansi(frame, clear=resized))
        self.stream.flush()
        self._last = frame
        return True

    def close(self) -> None:
        self.stream.write(RESET + SHOW_CURSOR + "\n")
        self.stream.flush()
        self._last = None
