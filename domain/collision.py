"""
Collision rules evaluated once per tick.
"""

from enum import Enum
from typing import Iterable, Tuple

from .geometry import Bounds, Position


class TickResult(Enum):
    """Outcome of one simulation step."""

    CONTINUE = "continue"
    GROW = "grow"
    GAME_OVER = "game_over"


def detect_collision(
    segments: Iterable[Tuple[int, int]],
    food_position: Tuple[int, int],
    bounds: Bounds,
) -> TickResult:
    """
    Classify a candidate body against the border and the food.

    Rules, first match wins:
      1) any segment on the border ring -> GAME_OVER
      2) any segment on the food -> GROW
      3) otherwise -> CONTINUE

    The snake crossing its own body is not a collision.
    """
    cells = [Position(*cell) for cell in segments]

    if any(bounds.on_border(cell) for cell in cells):
        return TickResult.GAME_OVER

    if Position(*food_position) in cells:
        return TickResult.GROW

    return TickResult.CONTINUE
