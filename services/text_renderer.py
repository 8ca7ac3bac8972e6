"""
In-memory renderer: draws frames into a character grid instead of a terminal.

Used for headless runs and for checking what a frame would look like.
"""

from typing import List, Tuple

from domain.geometry import Bounds, Position
from .renderer import Renderer, border_cells


class TextRenderer(Renderer):
    """
    Keeps the frame being drawn as rows of characters.

    Attributes:
        frames: every presented frame, as a newline-joined string
        colors: (fg, bg) per cell of the frame being drawn
    """

    def __init__(self, bounds: Bounds):
        self.bounds = bounds
        self.frames: List[str] = []
        self.clear()

    def clear(self):
        width, height = self.bounds
        self.grid = [[' ' for _ in range(width)] for _ in range(height)]
        self.colors = [[(None, None) for _ in range(width)] for _ in range(height)]

    def _put(self, position: Position, text: str, colors: Tuple[str, str]):
        x, y = position
        if not 0 <= y < len(self.grid):
            return
        # Text running past the right edge is clipped
        for offset, char in enumerate(text):
            if 0 <= x + offset < len(self.grid[y]):
                self.grid[y][x + offset] = char
                self.colors[y][x + offset] = colors

    def draw_border(self, bounds: Bounds, color: str):
        for position, glyph in border_cells(bounds):
            self._put(position, glyph, (color, None))

    def draw_cell(self, position: Position, glyph: str, fg: str, bg: str):
        self._put(position, glyph, (fg, bg))

    def draw_text(self, position: Position, text: str, fg: str, bg: str):
        self._put(position, text, (fg, bg))

    def present(self):
        self.frames.append(self.render())

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def char_at(self, x: int, y: int) -> str:
        return self.grid[y][x]
