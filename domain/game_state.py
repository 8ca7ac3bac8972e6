"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Optional, Tuple

from .geometry import Bounds, Position


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of simulation steps taken so far
        segments: tuple of Position from tail to head
        direction: heading at the time of the snapshot
        food: position of the food
        food_count: food eaten so far
        bounds: board dimensions
        game_over: whether the session has ended
        end_reason: 'wall' or 'quit' once the session has ended
    """

    def __init__(
        self,
        tick: int,
        segments: Tuple[Position, ...],
        direction: str,
        food: Position,
        food_count: int,
        bounds: Bounds,
        game_over: bool = False,
        end_reason: Optional[str] = None,
    ):
        self.tick = tick
        self.segments = segments
        self.direction = direction
        self.food = food
        self.food_count = food_count
        self.bounds = bounds
        self.game_over = game_over
        self.end_reason = end_reason

    @property
    def head(self) -> Position:
        return self.segments[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        + = border
        . = empty space
        * = food
        # = snake body
        @ = snake head
        Rows run top to bottom, matching the terminal.
        """
        width, height = self.bounds
        board = [['.' for _ in range(width)] for _ in range(height)]

        for y in range(height):
            for x in range(width):
                if self.bounds.on_border(Position(x, y)):
                    board[y][x] = '+'

        fx, fy = self.food
        board[fy][fx] = '*'

        # Head is drawn last so it wins over body and food
        for x, y in self.segments[:-1]:
            if self.bounds.contains(Position(x, y)):
                board[y][x] = '#'
        hx, hy = self.head
        if self.bounds.contains(self.head):
            board[hy][hx] = '@'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, length={len(self.segments)}, "
            f"food={tuple(self.food)}, food_count={self.food_count}, game_over={self.game_over}>"
        )
