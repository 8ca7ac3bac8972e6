"""
Terminal session setup for the curses front end.

Puts the terminal into the state the game needs for the length of a
session (raw keys, hidden cursor, colours, window title and size) and
restores what curses.wrapper does not.
"""

import curses
import logging
import sys

from domain.constants import WINDOW_TITLE
from domain.geometry import Bounds

logger = logging.getLogger(__name__)


class TerminalTooSmallError(RuntimeError):
    """The terminal cannot fit the play area."""

    def __init__(self, bounds: Bounds, rows: int, cols: int):
        self.bounds = bounds
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Terminal too small: need at least {bounds.width}x{bounds.height}, got {cols}x{rows}"
        )


class TerminalControl:
    """
    Context manager around a curses screen for one game session.

    Usage:
        with TerminalControl(stdscr, bounds) as terminal:
            ...
    """

    def __init__(self, screen, bounds: Bounds, title: str = WINDOW_TITLE, stream=None):
        self.screen = screen
        self.bounds = bounds
        self.title = title
        self.stream = stream or sys.stdout

    def _write_escape(self, sequence: str):
        self.stream.write(sequence)
        self.stream.flush()

    def set_title(self, title: str):
        self._write_escape(f"\x1b]0;{title}\x07")

    def request_size(self, cols: int, rows: int):
        """Ask the terminal emulator to resize; many ignore this."""
        self._write_escape(f"\x1b[8;{rows};{cols}t")

    def check_size(self):
        rows, cols = self.screen.getmaxyx()
        if rows < self.bounds.height or cols < self.bounds.width:
            raise TerminalTooSmallError(self.bounds, rows, cols)

    def __enter__(self):
        self.request_size(self.bounds.width, self.bounds.height)
        self.set_title(self.title)
        self.check_size()

        curses.raw()
        curses.noecho()
        curses.curs_set(0)
        curses.start_color()
        curses.use_default_colors()
        self.screen.keypad(True)
        self.screen.nodelay(True)

        logger.info("Terminal ready for %dx%d play area", self.bounds.width, self.bounds.height)
        return self

    def __exit__(self, exc_type, exc, tb):
        curses.noraw()
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("Terminal does not support restoring the cursor")
        return False
