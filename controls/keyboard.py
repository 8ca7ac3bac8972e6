"""
Keyboard input source backed by a curses window.
"""

import curses
import logging
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from .base import InputSource, KeyEvent, QUIT, OTHER

logger = logging.getLogger(__name__)

# Arrow keys move, 'q' quits; everything else is OTHER
KEY_MAP = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('q'): QUIT,
}


class CursesKeyboard(InputSource):
    """Reads key presses from a curses window with a bounded wait."""

    def __init__(self, window):
        self.window = window

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        # curses takes milliseconds; 0 makes getch non-blocking
        self.window.timeout(max(0, int(timeout * 1000)))
        ch = self.window.getch()
        if ch == -1:
            return None

        code = KEY_MAP.get(ch, OTHER)
        if code == OTHER:
            logger.debug("Ignoring unmapped key %r", ch)
        return KeyEvent(code, ch)
