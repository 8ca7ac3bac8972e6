"""
Tests for main.py - Snake game engine and host loop.

These tests drive SnakeGame and run_session headlessly, with scripted input,
the in-memory renderer and a fake clock.
"""

import curses
import pytest
import random
import sys
import os
from unittest.mock import Mock, patch, DEFAULT

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SnakeGame, run_session, play, main, GAME_OVER_PAUSE_SECONDS
from controls import ScriptedInput, QUIT, OTHER
from domain import Food, Snake, TickResult, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.constants import DELTAS, FOOD_MARGIN, STATUS_TEXT, GAME_OVER_TEXT
from domain.geometry import Bounds
from domain.game_state import GameState
from services.scheduler import TickScheduler
from services.terminal import TerminalTooSmallError
from services.text_renderer import TextRenderer


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


def make_game(body=((5, 5), (5, 6), (5, 7)), direction=DOWN, food=(20, 20), seed=0):
    return SnakeGame(
        75,
        35,
        snake=Snake(body, direction),
        food=Food(food),
        rng=random.Random(seed),
    )


class TestSnakeGameTick:
    """Tests for SnakeGame.run_tick."""

    def test_game_defaults(self):
        """A default game uses the 75x35 board and the starting snake."""
        game = SnakeGame()
        assert game.bounds == (75, 35)
        assert game.snake.segments() == ((5, 5), (5, 6), (5, 7))
        assert game.food.position == (3, 3)
        assert game.tick_count == 0
        assert game.game_over is False

    def test_scenario_continue_tick(self):
        """Scenario A: a plain tick shifts the body down by one."""
        game = make_game()
        result = game.run_tick()
        assert result is TickResult.CONTINUE
        assert game.snake.segments() == ((5, 6), (5, 7), (5, 8))
        assert game.tick_count == 1

    def test_scenario_grow_tick(self):
        """Scenario B: moving onto food grows the snake and relocates food."""
        game = make_game(food=(5, 8))
        result = game.run_tick()
        assert result is TickResult.GROW
        assert game.snake.segments() == ((5, 5), (5, 6), (5, 7), (5, 8))
        assert game.food_count == 1
        fx, fy = game.food.position
        assert FOOD_MARGIN <= fx < 75 - FOOD_MARGIN
        assert FOOD_MARGIN <= fy < 35 - FOOD_MARGIN
        assert game.food.active is True

    @pytest.mark.parametrize("direction", sorted(VALID_MOVES))
    def test_scenario_wall_is_game_over_any_direction(self, direction):
        """Scenario C: a body touching x=0 ends the game whatever the heading."""
        game = make_game(body=((1, 10), (0, 10)), direction=direction)
        result = game.run_tick()
        assert result is TickResult.GAME_OVER
        assert game.game_over is True
        assert game.end_reason == "wall"

    def test_scenario_reversal_key_ignored(self):
        """Scenario D: heading left, a right key keeps the snake going left."""
        game = make_game(body=((12, 10), (11, 10), (10, 10)), direction=LEFT)
        game.run_tick(ScriptedInput([RIGHT]))
        assert game.snake.direction == LEFT
        assert game.snake.head == (9, 10)

    def test_direction_key_applies_before_move(self):
        """A turn pressed before the tick is used for that tick's move."""
        game = make_game()
        game.run_tick(ScriptedInput([RIGHT]))
        assert game.snake.direction == RIGHT
        assert game.snake.head == (6, 7)

    def test_only_one_key_consumed_per_tick(self):
        """Each tick reads at most one key; the rest wait for later ticks."""
        game = make_game()
        keys = ScriptedInput([RIGHT, UP])
        game.run_tick(keys)
        assert game.snake.direction == RIGHT
        assert len(keys.pending) == 1
        game.run_tick(keys)
        assert game.snake.direction == UP

    def test_empty_poll_and_unknown_keys_change_nothing(self):
        """No key and an unmapped key leave the heading alone."""
        game = make_game()
        game.run_tick(ScriptedInput([None]))
        game.run_tick(ScriptedInput([OTHER]))
        assert game.snake.direction == DOWN
        assert game.snake.head == (5, 9)

    def test_quit_ends_game_without_moving(self):
        """Quit stops the session before the snake moves."""
        game = make_game()
        result = game.run_tick(ScriptedInput([QUIT]))
        assert result is TickResult.GAME_OVER
        assert game.end_reason == "quit"
        assert game.snake.segments() == ((5, 5), (5, 6), (5, 7))
        assert game.tick_count == 0

    def test_input_is_polled_with_zero_timeout(self):
        """The per-tick poll never waits."""
        source = Mock()
        source.poll.return_value = None
        make_game().run_tick(source)
        source.poll.assert_called_once_with(0)

    def test_tick_after_game_over_does_nothing(self):
        """Once over, further ticks report GAME_OVER and change nothing."""
        game = make_game(body=((1, 10), (0, 10)), direction=UP)
        game.run_tick()
        segments = game.snake.segments()
        assert game.run_tick() is TickResult.GAME_OVER
        assert game.snake.segments() == segments

    def test_inactive_food_is_relocated_before_tick(self):
        """Food is never left absent during play."""
        game = make_game()
        game.food.active = False
        game.run_tick()
        assert game.food.active is True
        fx, fy = game.food.position
        assert FOOD_MARGIN <= fx < 75 - FOOD_MARGIN
        assert FOOD_MARGIN <= fy < 35 - FOOD_MARGIN

    def test_snake_may_cross_itself(self):
        """Running into its own body does not end the game."""
        body = ((10, 9), (10, 10), (11, 10), (12, 10), (12, 11), (11, 11))
        game = make_game(body=body, direction=LEFT)
        # Turning up from (11, 11) puts the head on (11, 10), still part of the body
        assert game.run_tick(ScriptedInput([UP])) is TickResult.CONTINUE
        assert game.snake.head == (11, 10)
        assert game.snake.segments().count((11, 10)) == 2
        assert game.game_over is False

    def test_food_respawned_under_body_is_eaten_next_tick(self):
        """Food relocated onto the snake is eaten on the following tick."""
        game = make_game(food=(5, 8))
        assert game.run_tick() is TickResult.GROW
        # Pretend the respawn landed under the body, which relocate allows
        game.food.position = game.snake.segments()[1]

        assert game.run_tick() is TickResult.GROW
        assert game.food_count == 2
        assert len(game.snake) == 5
        assert game.snake.head == (5, 9)

    def test_length_and_count_invariants_over_random_play(self):
        """Continue keeps length, Grow adds one segment and one food."""
        rng = random.Random(99)
        game = SnakeGame(rng=random.Random(5))
        game.snake = Snake([(37, 17), (37, 18)], DOWN)
        keys = ScriptedInput()
        for _ in range(500):
            if game.game_over:
                break
            keys.push(rng.choice(sorted(VALID_MOVES) + [None, OTHER]))
            # Put the food right in front of the snake now and then
            if rng.random() < 0.3:
                game.food.position = game.snake.next_head()
            before_len, before_count = len(game.snake), game.food_count
            before_head = game.snake.head

            result = game.run_tick(keys)

            dx, dy = DELTAS[game.snake.direction]
            assert game.snake.head == (before_head.x + dx, before_head.y + dy)
            if result is TickResult.GROW:
                assert len(game.snake) == before_len + 1
                assert game.food_count == before_count + 1
            else:
                assert len(game.snake) == before_len
                assert game.food_count == before_count

    def test_get_current_state(self):
        """get_current_state returns a detached snapshot."""
        game = make_game()
        state = game.get_current_state()
        game.run_tick()
        assert isinstance(state, GameState)
        assert state.segments == ((5, 5), (5, 6), (5, 7))
        assert state.tick == 0
        assert state.direction == DOWN
        assert state.food == (20, 20)


class TestDrawFrame:
    """Tests for SnakeGame.draw_frame with the text renderer."""

    def test_frame_contents(self):
        """A frame has the border, snake, food, counter and status line."""
        game = SnakeGame()
        renderer = TextRenderer(game.bounds)
        game.draw_frame(renderer)

        assert len(renderer.frames) == 1
        assert renderer.char_at(5, 5) == "#"
        assert renderer.char_at(5, 7) == "#"
        assert renderer.char_at(3, 3) == "*"
        assert renderer.char_at(0, 0) == "0"
        assert renderer.char_at(10, 0) == "━"
        assert renderer.char_at(74, 10) == "┃"
        assert renderer.char_at(74, 0) == "┓"
        assert renderer.grid[34][:len(STATUS_TEXT)] == list(STATUS_TEXT)
        assert renderer.colors[5][5] == ("green", "black")
        assert renderer.colors[3][3] == ("yellow", "black")
        assert renderer.colors[10][0] == ("red", None)

    def test_counter_shows_food_eaten(self):
        """The counter at the top-left tracks eaten food."""
        game = make_game(food=(5, 8))
        game.run_tick()
        renderer = TextRenderer(game.bounds)
        game.draw_frame(renderer)
        assert renderer.char_at(0, 0) == "1"

    def test_game_over_frame(self):
        """After a wall hit the frame carries the game-over banner."""
        game = make_game(body=((1, 10), (0, 10)), direction=UP)
        game.run_tick()
        renderer = TextRenderer(game.bounds)
        game.draw_frame(renderer)
        assert GAME_OVER_TEXT in renderer.frames[-1].split("\n")[17]

    def test_quit_frame_has_no_banner(self):
        """Quitting is not a loss, so no banner is drawn."""
        game = make_game()
        game.run_tick(ScriptedInput([QUIT]))
        renderer = TextRenderer(game.bounds)
        game.draw_frame(renderer)
        assert GAME_OVER_TEXT not in renderer.frames[-1]


class TestRunSession:
    """Tests for the run_session host loop."""

    def test_runs_until_wall(self):
        """With no input the default snake falls into the bottom wall."""
        clock = FakeClock()
        game = SnakeGame(rng=random.Random(0))
        renderer = TextRenderer(game.bounds)
        scheduler = TickScheduler(0.5, clock=clock)

        state = run_session(game, ScriptedInput(), renderer, scheduler, sleep=clock.sleep)

        # Head starts at y=7 and the bottom border row is y=34
        assert state.end_reason == "wall"
        assert state.tick == 27
        assert state.head == (5, 34)
        assert state.food_count == 0
        assert len(renderer.frames) == 1 + 27
        assert clock.now == pytest.approx(27 * 0.5)

    def test_quit_stops_the_loop(self):
        """A quit key ends the session on the tick it is read."""
        clock = FakeClock()
        game = SnakeGame(rng=random.Random(0))
        renderer = TextRenderer(game.bounds)
        scheduler = TickScheduler(0.5, clock=clock)

        state = run_session(
            game, ScriptedInput([None, None, QUIT]), renderer, scheduler, sleep=clock.sleep
        )

        assert state.end_reason == "quit"
        assert state.tick == 2
        assert len(renderer.frames) == 4
        assert clock.now == pytest.approx(1.5)

    def test_no_ticks_without_elapsed_time(self):
        """The loop sleeps instead of stepping when no cadence has passed."""
        clock = FakeClock()
        sleeps = []

        def sleep(seconds):
            sleeps.append(seconds)
            clock.sleep(seconds)

        game = SnakeGame(rng=random.Random(0))
        run_session(game, ScriptedInput([QUIT]), TextRenderer(game.bounds),
                    TickScheduler(0.5, clock=clock), sleep=sleep)

        assert sleeps == [pytest.approx(0.5)]


class TestEntryPoints:
    """Tests for play() and main()."""

    def test_main_reports_small_terminal(self, capsys):
        """A terminal that is too small exits with status 1."""
        error = TerminalTooSmallError(Bounds.create(75, 35), 20, 40)
        with patch("main.configure_logging"), patch("main.curses.wrapper", side_effect=error):
            assert main() == 1
        assert "Terminal too small" in capsys.readouterr().err

    def test_main_returns_zero_after_game(self, capsys):
        """A finished game exits with status 0 and prints the food count."""
        state = SnakeGame().get_current_state()
        state.end_reason = "quit"
        with patch("main.configure_logging"), patch("main.curses.wrapper", return_value=state):
            assert main() == 0
        assert "Food eaten: 0" in capsys.readouterr().out

    def test_play_holds_game_over_frame(self):
        """After a wall hit, play waits for a key before restoring the terminal."""
        stdscr = Mock()
        stdscr.getmaxyx.return_value = (35, 75)
        stdscr.getch.return_value = -1

        final = make_game(body=((1, 10), (0, 10)))
        final.run_tick()
        curses_calls = dict.fromkeys(
            ["raw", "noraw", "noecho", "curs_set", "start_color", "use_default_colors"], DEFAULT
        )

        with patch.multiple("services.terminal.curses", **curses_calls), \
                patch("main.run_session", return_value=final.get_current_state()):
            state = play(stdscr)

        assert state.end_reason == "wall"
        stdscr.timeout.assert_called_with(int(GAME_OVER_PAUSE_SECONDS * 1000))

    def test_play_ignores_keys_queued_before_the_crash(self):
        """Keys pressed before the wall hit do not cut the game-over hold short."""
        stdscr = Mock()
        stdscr.getmaxyx.return_value = (35, 75)
        stdscr.getch.side_effect = [curses.KEY_UP, curses.KEY_LEFT, -1, -1]

        final = make_game(body=((1, 10), (0, 10)))
        final.run_tick()
        curses_calls = dict.fromkeys(
            ["raw", "noraw", "noecho", "curs_set", "start_color", "use_default_colors"], DEFAULT
        )

        with patch.multiple("services.terminal.curses", **curses_calls), \
                patch("main.run_session", return_value=final.get_current_state()):
            play(stdscr)

        assert stdscr.getch.call_count == 4
        stdscr.timeout.assert_called_with(int(GAME_OVER_PAUSE_SECONDS * 1000))
