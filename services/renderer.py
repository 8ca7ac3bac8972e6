"""
Rendering Service for the Terminal Snake

Defines the drawing primitives the game uses for each frame and the curses
implementation that puts them on the screen:
- Border around the play area (box-drawing characters)
- One glyph per snake segment and one for the food
- Food counter and status line as plain text
"""

import curses
import logging
from typing import Dict, Tuple

from domain.constants import BLACK, WHITE, RED, GREEN, YELLOW
from domain.geometry import Bounds, Position

logger = logging.getLogger(__name__)

# Heavy box-drawing border
BORDER_HORIZONTAL = "━"
BORDER_VERTICAL = "┃"
BORDER_TOP_LEFT = "┏"
BORDER_TOP_RIGHT = "┓"
BORDER_BOTTOM_LEFT = "┗"
BORDER_BOTTOM_RIGHT = "┛"

# Colour names -> curses colour numbers (-1 keeps the terminal default)
CURSES_COLORS = {
    BLACK: curses.COLOR_BLACK,
    WHITE: curses.COLOR_WHITE,
    RED: curses.COLOR_RED,
    GREEN: curses.COLOR_GREEN,
    YELLOW: curses.COLOR_YELLOW,
    None: -1,
}


class Renderer:
    """
    Base class/interface for frame drawing.

    A frame is built with clear(), any number of draw_* calls, and made
    visible with present().
    """

    def clear(self):
        raise NotImplementedError

    def draw_border(self, bounds: Bounds, color: str):
        raise NotImplementedError

    def draw_cell(self, position: Position, glyph: str, fg: str, bg: str):
        raise NotImplementedError

    def draw_text(self, position: Position, text: str, fg: str, bg: str):
        raise NotImplementedError

    def present(self):
        raise NotImplementedError


def border_cells(bounds: Bounds):
    """
    Yield (position, glyph) for every cell of the border ring.
    """
    right, bottom = bounds.width - 1, bounds.height - 1

    for x in range(1, right):
        yield Position(x, 0), BORDER_HORIZONTAL
        yield Position(x, bottom), BORDER_HORIZONTAL
    for y in range(1, bottom):
        yield Position(0, y), BORDER_VERTICAL
        yield Position(right, y), BORDER_VERTICAL

    yield Position(0, 0), BORDER_TOP_LEFT
    yield Position(right, 0), BORDER_TOP_RIGHT
    yield Position(0, bottom), BORDER_BOTTOM_LEFT
    yield Position(right, bottom), BORDER_BOTTOM_RIGHT


class CursesRenderer(Renderer):
    """Draws frames into a curses window."""

    def __init__(self, window):
        self.window = window
        self._pairs: Dict[Tuple[str, str], int] = {}

    def _color(self, fg: str, bg: str) -> int:
        """Return the attribute for a (fg, bg) combination, allocating a pair on first use."""
        key = (fg, bg)
        if key not in self._pairs:
            pair_number = len(self._pairs) + 1
            curses.init_pair(pair_number, CURSES_COLORS[fg], CURSES_COLORS[bg])
            self._pairs[key] = pair_number
        return curses.color_pair(self._pairs[key])

    def _put(self, position: Position, text: str, attr: int):
        x, y = position
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            # curses reports an error after drawing into the bottom-right cell,
            # because the cursor cannot advance past it
            max_y, max_x = self.window.getmaxyx()
            if (y, x + len(text)) != (max_y - 1, max_x):
                raise

    def clear(self):
        self.window.erase()

    def draw_border(self, bounds: Bounds, color: str):
        attr = self._color(color, None)
        for position, glyph in border_cells(bounds):
            self._put(position, glyph, attr)

    def draw_cell(self, position: Position, glyph: str, fg: str, bg: str):
        self._put(position, glyph, self._color(fg, bg))

    def draw_text(self, position: Position, text: str, fg: str, bg: str):
        self._put(position, text, self._color(fg, bg))

    def present(self):
        self.window.refresh()
