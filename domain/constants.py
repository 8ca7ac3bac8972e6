"""
Game constants for the terminal snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: x grows to the right, y grows downwards
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Board settings (fixed for the lifetime of a session)
BOARD_WIDTH = 75
BOARD_HEIGHT = 35
TICK_SECONDS = 0.5

# Food spawns inside [FOOD_MARGIN, size - FOOD_MARGIN) on both axes
FOOD_MARGIN = 5
DEFAULT_FOOD_POSITION = (3, 3)

# Snake starts as 3 segments in a column, moving down (tail first)
INITIAL_BODY = [(5, 5), (5, 6), (5, 7)]
INITIAL_DIRECTION = DOWN

# Presentation
WINDOW_TITLE = "Snake"
SNAKE_GLYPH = "#"
FOOD_GLYPH = "*"
STATUS_TEXT = "Press 'q' to quit"
GAME_OVER_TEXT = "GAME OVER"

# Colour names understood by every Renderer
BLACK = "black"
WHITE = "white"
RED = "red"
GREEN = "green"
YELLOW = "yellow"

BORDER_COLOR = RED
SNAKE_COLORS = (GREEN, BLACK)
FOOD_COLORS = (YELLOW, BLACK)
TEXT_COLORS = (WHITE, BLACK)
