"""
Grid geometry: cell positions and the play-area bounds.
"""

from typing import NamedTuple

from .constants import DELTAS, FOOD_MARGIN


class Position(NamedTuple):
    """An (x, y) cell on the grid."""

    x: int
    y: int

    def step(self, direction: str) -> "Position":
        """Return the neighbouring cell one step towards ``direction``."""
        try:
            dx, dy = DELTAS[direction]
        except KeyError:
            raise ValueError(f"Unknown direction: {direction!r}") from None
        return Position(self.x + dx, self.y + dy)


class Bounds(NamedTuple):
    """
    Rectangular play area. The outermost ring of cells is the border.

    Attributes:
        width: number of columns, including both border columns
        height: number of rows, including both border rows
    """

    width: int
    height: int

    @classmethod
    def create(cls, width: int, height: int) -> "Bounds":
        """Build bounds, rejecting areas too small to hold the food rectangle."""
        if width <= 2 * FOOD_MARGIN or height <= 2 * FOOD_MARGIN:
            raise ValueError(
                f"Board {width}x{height} is too small; both sides must exceed {2 * FOOD_MARGIN}."
            )
        return cls(width, height)

    def on_border(self, position: Position) -> bool:
        x, y = position
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height
