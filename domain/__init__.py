"""
Domain entities for the terminal snake engine.

This module contains the core game entities that are independent of
terminal concerns (curses, keyboard, screen drawing).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE
from .geometry import Position, Bounds
from .snake import Snake
from .food import Food
from .collision import TickResult, detect_collision
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'Position', 'Bounds',
    'Snake',
    'Food',
    'TickResult', 'detect_collision',
    'GameState',
]
