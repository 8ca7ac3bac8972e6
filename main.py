import curses
import logging
import random
import sys
import time
from typing import Callable, Optional

from config import configure_logging
from controls import CursesKeyboard, InputSource, KeyEvent, QUIT, OTHER
from domain import (
    Bounds,
    Food,
    GameState,
    Position,
    Snake,
    TickResult,
    VALID_MOVES,
    detect_collision,
)
from domain.constants import (
    BOARD_WIDTH,
    BOARD_HEIGHT,
    BORDER_COLOR,
    FOOD_COLORS,
    GAME_OVER_TEXT,
    SNAKE_COLORS,
    SNAKE_GLYPH,
    STATUS_TEXT,
    TEXT_COLORS,
)
from services.renderer import CursesRenderer, Renderer
from services.scheduler import TickScheduler
from services.terminal import TerminalControl, TerminalTooSmallError

logger = logging.getLogger(__name__)

# How long the game-over frame stays up before the terminal is restored
GAME_OVER_PAUSE_SECONDS = 3.0


class SnakeGame:
    """
    Manages:
      - Board bounds
      - The snake and its heading
      - The food item
      - Tick count and end-of-game state
    """
    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        snake: Optional[Snake] = None,
        food: Optional[Food] = None,
        rng: Optional[random.Random] = None,
    ):
        self.bounds = Bounds.create(width, height)
        self.snake = snake if snake is not None else Snake()
        self.food = food if food is not None else Food()
        self.rng = rng or random.Random()
        self.tick_count = 0
        self.game_over = False
        self.end_reason: Optional[str] = None

        logger.info(
            "New game on %dx%d board, snake at %s heading %s",
            self.bounds.width,
            self.bounds.height,
            list(self.snake.segments()),
            self.snake.direction,
        )

    @property
    def food_count(self) -> int:
        return self.snake.food_count

    def handle_key(self, event: Optional[KeyEvent]):
        """
        Apply one key event. Missing events and unmapped keys change nothing.
        """
        if event is None or event.code == OTHER:
            return
        if event.code == QUIT:
            self.end_game("quit")
        elif event.code in VALID_MOVES:
            self.snake.set_direction(event.code)

    def run_tick(self, input_source: Optional[InputSource] = None) -> TickResult:
        """
        Execute one tick:
          1) Poll input once without waiting and apply at most one key
          2) Work out where the body would be after a normal move
          3) Classify that body against the border and the food
          4) Commit a grow (and relocate food) or a plain move
          5) End the game on a wall hit

        A quit key ends the game before the snake moves; the tick then
        reports GAME_OVER with end_reason 'quit'.
        """
        if self.game_over:
            logger.warning("Game is already over (%s). No more ticks.", self.end_reason)
            return TickResult.GAME_OVER

        if input_source is not None:
            self.handle_key(input_source.poll(0))
            if self.game_over:
                return TickResult.GAME_OVER

        if not self.food.active:
            self.food.relocate(self.bounds, self.rng)

        candidate = self.snake.peek_forward()
        result = detect_collision(candidate, self.food.position, self.bounds)

        if result is TickResult.GROW:
            self.snake.grow_forward()
            self.food.active = False
            eaten_at = self.food.position
            self.food.relocate(self.bounds, self.rng)
            logger.info(
                "Food eaten at %s (total %d), respawned at %s",
                tuple(eaten_at),
                self.food_count,
                tuple(self.food.position),
            )
        else:
            self.snake.move_forward()

        self.tick_count += 1
        logger.debug("Tick %d: head=%s result=%s", self.tick_count, tuple(self.snake.head), result.value)

        if result is TickResult.GAME_OVER:
            self.end_game("wall")

        return result

    def end_game(self, reason: str):
        self.game_over = True
        self.end_reason = reason
        logger.info(
            "Game Over: %s after %d ticks, food eaten: %d, length: %d",
            reason,
            self.tick_count,
            self.food_count,
            len(self.snake),
        )

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            segments=self.snake.segments(),
            direction=self.snake.direction,
            food=self.food.position,
            food_count=self.food_count,
            bounds=self.bounds,
            game_over=self.game_over,
            end_reason=self.end_reason,
        )

    def draw_frame(self, renderer: Renderer):
        """
        Draw the whole board: border, snake, food, counter and status line.
        """
        width, height = self.bounds
        renderer.clear()
        renderer.draw_border(self.bounds, BORDER_COLOR)

        for segment in self.snake.segments():
            if self.bounds.contains(segment):
                renderer.draw_cell(segment, SNAKE_GLYPH, *SNAKE_COLORS)

        renderer.draw_cell(self.food.position, self.food.glyph, *FOOD_COLORS)

        renderer.draw_text(Position(0, 0), str(self.food_count), *TEXT_COLORS)
        renderer.draw_text(Position(0, height - 1), STATUS_TEXT, *TEXT_COLORS)

        if self.game_over and self.end_reason == "wall":
            x = (width - len(GAME_OVER_TEXT)) // 2
            renderer.draw_text(Position(x, height // 2), GAME_OVER_TEXT, *TEXT_COLORS)

        renderer.present()


# -------------------------------
# Host Loop
# -------------------------------

def run_session(
    game: SnakeGame,
    input_source: InputSource,
    renderer: Renderer,
    scheduler: Optional[TickScheduler] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> GameState:
    """
    Drive a game until the snake hits the wall or the player quits.

    Args:
        game: the session to advance
        input_source: polled once per tick with zero wait
        renderer: receives one frame up front and one after every tick
        scheduler: decides when a tick is due (defaults to the 500ms cadence)
        sleep: how the loop waits between ticks

    Returns:
        The final GameState.
    """
    scheduler = scheduler or TickScheduler()

    game.draw_frame(renderer)
    scheduler.reset()

    while not game.game_over:
        if scheduler.due():
            game.run_tick(input_source)
            game.draw_frame(renderer)
            continue
        sleep(scheduler.time_until_next())

    state = game.get_current_state()
    logger.info("Session ended (%s) after %d ticks", state.end_reason, state.tick)
    return state


def play(stdscr) -> GameState:
    """
    curses entry point: set up the terminal and run one game.
    """
    bounds = Bounds.create(BOARD_WIDTH, BOARD_HEIGHT)
    with TerminalControl(stdscr, bounds):
        game = SnakeGame(bounds.width, bounds.height)
        keyboard = CursesKeyboard(stdscr)
        renderer = CursesRenderer(stdscr)

        state = run_session(game, keyboard, renderer)
        if state.end_reason == "wall":
            # Keys pressed before the crash are still queued; only a fresh key ends the hold
            while keyboard.poll(0) is not None:
                pass
            keyboard.poll(GAME_OVER_PAUSE_SECONDS)
        return state


# -------------------------------
# Main Entry Point
# -------------------------------
def main() -> int:
    configure_logging()

    try:
        state = curses.wrapper(play)
    except TerminalTooSmallError as exc:
        logger.error("%s", exc)
        print(exc, file=sys.stderr)
        return 1

    print(f"Game over ({state.end_reason}). Food eaten: {state.food_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
