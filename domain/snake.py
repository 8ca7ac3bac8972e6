"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterable, Tuple

from .constants import INITIAL_BODY, INITIAL_DIRECTION, OPPOSITE, VALID_MOVES
from .geometry import Position

logger = logging.getLogger(__name__)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from the tail at index 0 to the head at the end
        direction: current heading, one of UP/DOWN/LEFT/RIGHT
        food_count: number of food items eaten this session
    """

    def __init__(
        self,
        positions: Iterable[Tuple[int, int]] = INITIAL_BODY,
        direction: str = INITIAL_DIRECTION,
    ):
        cells = [Position(*cell) for cell in positions]
        if not cells:
            raise ValueError("A snake needs at least one segment.")
        for previous, current in zip(cells, cells[1:]):
            if abs(previous.x - current.x) + abs(previous.y - current.y) != 1:
                raise ValueError(f"Segments {previous} and {current} are not adjacent.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")

        self.positions = deque(cells)
        self.direction = direction
        self.food_count = 0

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def head(self) -> Position:
        """Return the head position (last element)."""
        assert self.positions, "snake has no segments"
        return self.positions[-1]

    @property
    def tail(self) -> Position:
        """Return the tail position (first element)."""
        assert self.positions, "snake has no segments"
        return self.positions[0]

    def set_direction(self, requested: str) -> bool:
        """
        Change heading unless ``requested`` would reverse the snake onto itself.

        Returns:
            True if the heading is now ``requested``, False if the request was ignored.
        """
        if requested not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {requested!r}")
        if requested == OPPOSITE[self.direction]:
            logger.debug("Ignoring reversal from %s to %s", self.direction, requested)
            return False
        self.direction = requested
        return True

    def next_head(self) -> Position:
        """The head the next step would produce, in the current direction."""
        return self.head.step(self.direction)

    def peek_forward(self) -> Tuple[Position, ...]:
        """Segments ``move_forward`` would leave behind, without moving."""
        return tuple(self.positions)[1:] + (self.next_head(),)

    def move_forward(self) -> Position:
        """Advance one cell: new head in front, one cell dropped from the tail."""
        new_head = self.next_head()
        self.positions.append(new_head)
        self.positions.popleft()
        return new_head

    def grow_forward(self) -> Position:
        """Advance one cell keeping the tail, and count the food eaten."""
        new_head = self.next_head()
        self.positions.append(new_head)
        self.food_count += 1
        return new_head

    def segments(self) -> Tuple[Position, ...]:
        """Read-only snapshot of the body, tail first."""
        return tuple(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self)}, head={tuple(self.head)}, direction={self.direction}>"
