"""
Snake game engine: a state machine advanced by discrete ticks.

The engine owns the snake, its direction and buffered intent, the food,
the obstacles, the score and the tick interval. It never keeps time
itself: an injected scheduler calls tick() at the current interval, input
sources call set_intent(), and a renderer callback receives a GameState
after every change.
"""

import logging
import math
import random
import threading
from typing import Any, Callable, Optional

from config import EngineConfig, coerce_config
from domain.constants import (
    DIRECTION_DELTAS,
    IDLE, RUNNING, PAUSED, GAME_OVER,
    RIGHT,
    DEATH_WALL, DEATH_SELF, DEATH_OBSTACLE, DEATH_BOARD_FULL,
    SPEED_FLOOR_MS, SPEEDUP_EVERY, SPEEDUP_FACTOR,
    is_reverse, parse_direction,
)
from domain.errors import PlacementExhausted
from domain.game_state import GameState
from domain.grid import Grid
from domain.occupancy import is_food_cell, is_obstacle_cell, is_snake_cell
from domain.placement import PlacementGenerator
from domain.snake import Snake

logger = logging.getLogger(__name__)

Renderer = Callable[[GameState], Any]


def next_speed(speed_ms: int, score: int) -> int:
    """
    Tick interval after reaching `score`.

    Every SPEEDUP_EVERY apples the interval shrinks by 10%, floored to whole
    milliseconds and never below SPEED_FLOOR_MS.
    """
    if score % SPEEDUP_EVERY == 0 and speed_ms > SPEED_FLOOR_MS:
        return max(SPEED_FLOOR_MS, math.floor(speed_ms * SPEEDUP_FACTOR))
    return speed_ms


class GameEngine:
    """
    Manages:
      - Board (width, height, wrap)
      - Snake, direction and the buffered intent
      - Food and obstacles
      - Score, high score and speed
      - Idle / Running / Paused / GameOver status

    Collaborators are all optional:
      scheduler: object with start(interval_ms, callback) and stop()
      renderer: callable receiving each GameState
      high_score_store: object with get() -> int and set(int)
      rng: random.Random used for placement
    """

    def __init__(
        self,
        config: Optional[Any] = None,
        scheduler=None,
        renderer: Optional[Renderer] = None,
        high_score_store=None,
        rng: Optional[random.Random] = None,
    ):
        self.scheduler = scheduler
        self.renderer = renderer
        self.high_score_store = high_score_store
        self.rng = rng or random.Random()

        self.config: EngineConfig = (coerce_config(config) or EngineConfig()).validate()
        self.status = IDLE
        self.score = 0
        self.tick_number = 0
        self.game_over_reason: Optional[str] = None

        self.grid = Grid(self.config.grid_width, self.config.grid_height, self.config.wrap_enabled)
        self.placement = PlacementGenerator(self.grid, self.rng)
        self.snake = Snake([self.grid.center()])
        self.direction: Optional[str] = None
        self._intent: Optional[str] = None
        self._intent_lock = threading.Lock()
        self.food = None
        self.obstacles = frozenset()
        self.speed_ms = self.config.initial_speed_ms

        self.high_score = self._load_high_score()
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, config: Optional[Any] = None) -> GameState:
        """
        Start a fresh episode in the IDLE state.

        Obstacles are placed first (when enabled), then the food.

        Raises:
            ConfigurationError: if `config` is invalid; the engine keeps its
                previous state in that case
        """
        new_config = coerce_config(config)
        if new_config is not None:
            self.config = new_config.validate()

        self._stop_ticking()
        self.grid = Grid(self.config.grid_width, self.config.grid_height, self.config.wrap_enabled)
        self.placement.grid = self.grid

        self.snake = Snake([self.grid.center()])
        self.direction = None
        self._write_intent(None)
        self.score = 0
        self.tick_number = 0
        self.game_over_reason = None
        self.speed_ms = self.config.initial_speed_ms
        self.status = IDLE

        self.food = None
        if self.config.obstacles_enabled:
            self.obstacles = self.placement.place_obstacles(
                self.snake, None, self.config.obstacle_count
            )
        else:
            self.obstacles = frozenset()
        self.food = self.placement.place_food(self.snake, self.obstacles)

        logger.info(
            "Reset %dx%d board (wrap=%s, obstacles=%d, speed=%d ms)",
            self.grid.width, self.grid.height, self.grid.wrap,
            len(self.obstacles), self.speed_ms,
        )
        return self._emit()

    def start(self) -> None:
        """Enter RUNNING and arm the scheduler; a finished episode is reset first."""
        if self.status == RUNNING:
            return
        if self.status == GAME_OVER:
            self.reset()
        self.status = RUNNING
        if self.direction is None:
            self.direction = RIGHT
        self._start_ticking()

    def pause(self) -> None:
        if self.status != RUNNING:
            return
        self.status = PAUSED
        self._stop_ticking()
        self._emit()

    def toggle_pause(self) -> None:
        if self.status == RUNNING:
            self.pause()
        else:
            self.start()

    def set_speed(self, speed_ms: int) -> None:
        """
        Change the tick interval, as a speed slider would.

        The value becomes the initial speed for later resets. Before the
        first move (IDLE) it also replaces the current interval. A paused or
        running episode only picks it up when it is not slower than the
        current interval, and a finished episode keeps its final speed.
        """
        self.config = self.config.with_changes(initial_speed_ms=speed_ms).validate()
        if self.status == GAME_OVER:
            logger.info("Speed %d ms takes effect on the next episode", speed_ms)
            return
        if self.status == IDLE:
            self.speed_ms = speed_ms
            return
        if speed_ms > self.speed_ms:
            logger.info("Speed %d ms takes effect on the next reset", speed_ms)
            return
        self.speed_ms = speed_ms
        if self.status == RUNNING:
            self._start_ticking()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_intent(self, direction: Any) -> None:
        """
        Buffer a direction for the next tick.

        Ignored when not running, when the value is not a direction, or when
        it reverses the direction currently applied. Two inputs between ticks
        are both checked against the applied direction; the later one wins.
        """
        if self.status != RUNNING:
            return
        move = parse_direction(direction)
        if move is None:
            logger.debug("Ignoring unrecognized direction %r", direction)
            return
        if is_reverse(move, self.direction):
            logger.debug("Ignoring reverse direction %s", move)
            return
        self._write_intent(move)

    def _write_intent(self, move: Optional[str]) -> None:
        with self._intent_lock:
            self._intent = move

    def _read_intent(self) -> Optional[str]:
        with self._intent_lock:
            return self._intent

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> GameState:
        """
        Advance the game by one step:
          1) Apply the buffered intent unless it reverses the direction
          2) Do nothing while no direction is set
          3) Compute the next head
          4) Wrap it, or die on leaving the board
          5) Die on hitting the current body (tail included)
          6) Prepend the head
          7) Die on an obstacle; the check runs after the prepend, so the
             terminal snake is one cell longer
          8) Eat (score, speed, new food, high score) or drop the tail
          9) Emit the snapshot
        """
        if self.status != RUNNING:
            return self.snapshot()

        intent = self._read_intent()
        if intent is not None and not is_reverse(intent, self.direction):
            self.direction = intent

        if self.direction is None:
            return self.snapshot()

        head = self.grid.step(self.snake.head, DIRECTION_DELTAS[self.direction])

        if self.grid.wrap:
            head = self.grid.normalize(head)
        elif not self.grid.in_bounds(head):
            return self._game_over(DEATH_WALL)

        if is_snake_cell(head, self.snake):
            return self._game_over(DEATH_SELF)

        self.snake.grow_to(head)
        self.tick_number += 1

        if self.config.obstacles_enabled and is_obstacle_cell(head, self.obstacles):
            return self._game_over(DEATH_OBSTACLE)

        if is_food_cell(head, self.food):
            board_full = self._eat()
            if board_full:
                return self._game_over(DEATH_BOARD_FULL)
        else:
            self.snake.drop_tail()

        return self._emit()

    def _eat(self) -> bool:
        """Apply the effects of eating the food; returns True when no cell is left for new food."""
        self.score += 1

        speed = next_speed(self.speed_ms, self.score)
        if speed != self.speed_ms:
            logger.info("Score %d: speed %d ms -> %d ms", self.score, self.speed_ms, speed)
            self.speed_ms = speed
            self._start_ticking()

        board_full = False
        try:
            self.food = self.placement.place_food(self.snake, self.obstacles)
        except PlacementExhausted as e:
            logger.info("Board full: %s", e)
            self.food = None
            board_full = True

        if self.score > self.high_score:
            self.set_high_score(self.score)
        return board_full

    def _game_over(self, reason: str) -> GameState:
        self.status = GAME_OVER
        self.game_over_reason = reason
        self._stop_ticking()
        logger.info(
            "Game Over (%s) at tick %d with score %d", reason, self.tick_number, self.score
        )
        return self._emit()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _start_ticking(self) -> None:
        if self.scheduler is not None:
            self.scheduler.start(self.speed_ms, self.tick)

    def _stop_ticking(self) -> None:
        if self.scheduler is not None:
            self.scheduler.stop()

    # ------------------------------------------------------------------
    # High score side channel
    # ------------------------------------------------------------------

    def _load_high_score(self) -> int:
        if self.high_score_store is None:
            return 0
        try:
            return max(0, int(self.high_score_store.get()))
        except Exception as e:
            logger.warning("Could not read high score: %s", e)
            return 0

    def get_high_score(self) -> int:
        return self.high_score

    def set_high_score(self, value: int) -> None:
        self.high_score = max(0, int(value))
        if self.high_score_store is None:
            return
        try:
            self.high_score_store.set(self.high_score)
        except Exception as e:
            # Persistence failures must not end the episode
            logger.warning("Could not store high score %d: %s", self.high_score, e)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake=list(self.snake.positions),
            food=self.food,
            obstacles=sorted(self.obstacles),
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            speed_ms=self.speed_ms,
            width=self.grid.width,
            height=self.grid.height,
            wrap=self.grid.wrap,
            game_over_reason=self.game_over_reason,
            direction=self.direction,
        )

    def _emit(self) -> GameState:
        state = self.snapshot()
        if self.renderer is not None:
            self.renderer(state)
        return state

    def __repr__(self):
        return (
            f"<GameEngine status={self.status}, score={self.score}, "
            f"length={len(self.snake)}, speed={self.speed_ms}ms>"
        )
