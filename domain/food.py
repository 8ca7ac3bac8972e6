"""
Food entity: the single item the snake is chasing.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import DEFAULT_FOOD_POSITION, FOOD_GLYPH, FOOD_MARGIN
from .geometry import Bounds, Position

logger = logging.getLogger(__name__)


class Food:
    """
    One food item on the board.

    Food is never removed, only moved: eating it marks it inactive and the
    game relocates it straight away.
    """

    def __init__(self, position: Tuple[int, int] = DEFAULT_FOOD_POSITION, glyph: str = FOOD_GLYPH):
        self.position = Position(*position)
        self.glyph = glyph
        self.active = True

    def relocate(self, bounds: Bounds, rng: Optional[random.Random] = None) -> Position:
        """
        Move to a random cell inside the inset rectangle and mark active.

        The draw does not look at the snake, so food may land under its body.
        """
        rng = rng or random
        x = rng.randrange(FOOD_MARGIN, bounds.width - FOOD_MARGIN)
        y = rng.randrange(FOOD_MARGIN, bounds.height - FOOD_MARGIN)
        self.position = Position(x, y)
        self.active = True
        logger.debug("Food relocated to %s", tuple(self.position))
        return self.position

    def __repr__(self):
        return f"<Food position={tuple(self.position)}, active={self.active}>"
