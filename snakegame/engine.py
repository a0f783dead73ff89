"""
The snake game engine.

GameEngine owns all mutable game state. A driver calls update_direction()
whenever it has input and tick() once per loop iteration; the engine decides
through its throttle whether a simulation step actually happens on that tick.
Nothing here depends on wall-clock time, so the engine can be driven purely
by call counts.
"""

import logging
import random
from typing import Optional, Tuple

from . import config
from .domain.board import Board
from .domain.constants import (
    Direction,
    Status,
    MIN_BOARD_HEIGHT,
    MIN_BOARD_WIDTH,
    POINTS_PER_SPEED_UP,
    START_DIRECTION,
    START_SPEED,
    base_interval,
)
from .domain.food import FoodPlacer
from .domain.game_state import GameState
from .domain.point import Point
from .domain.snake import Snake

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum} to fit the starting snake, got {value}")


class GameEngine:
    """
    Manages:
      - Board (width, height)
      - Status (NEW -> PLAYING -> LOST)
      - The snake, its pending and last-moved directions
      - Food, score and speed
      - The tick throttle

    A game only advances while PLAYING, and only play_new() enters PLAYING.
    tick() is a no-op in the NEW and LOST states.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        max_food_attempts: Optional[int] = None
    ):
        _check_dimension("width", width, MIN_BOARD_WIDTH)
        _check_dimension("height", height, MIN_BOARD_HEIGHT)

        self._board = Board(width, height)
        if max_food_attempts is None:
            max_food_attempts = config.FOOD_MAX_ATTEMPTS
        self._food_placer = FoodPlacer(rng, max_food_attempts)

        self.new_game()

    def new_game(self) -> None:
        """(Re)initialize the state to that of a fresh game, in the NEW status."""
        width, height = self._board.width, self._board.height

        self._status = Status.NEW
        self._score = 0
        self._speed = START_SPEED
        self._throttle_count = base_interval(START_SPEED) - 1
        self._steps = 0

        self._food_location = Point((width // 4) * 3, height // 2)

        self._snake = Snake([
            (width // 4, height // 2),
            (width // 4 - 1, height // 2),
        ])
        self._direction = START_DIRECTION
        self._last_moved_direction = START_DIRECTION
        self._should_elongate = False

        logger.info("New %dx%d game", width, height)

    def play_new(self) -> None:
        """Reset to a fresh game and start playing immediately."""
        self.new_game()
        self._status = Status.PLAYING

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def status(self) -> Status:
        return self._status

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def food_location(self) -> Point:
        return self._food_location

    @property
    def snake_body(self) -> Tuple[Point, ...]:
        """The snake's cells, head first. A copy; changing it has no effect."""
        return self._snake.snapshot()

    @property
    def direction(self) -> Direction:
        """The direction the next step will take."""
        return self._direction

    @property
    def last_moved_direction(self) -> Direction:
        return self._last_moved_direction

    @property
    def throttle_count(self) -> int:
        """tick() calls still to be skipped before the next step."""
        return self._throttle_count

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def death_reason(self) -> Optional[str]:
        return self._snake.death_reason

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current game as a GameState.
        """
        return GameState(
            status=self._status,
            width=self._board.width,
            height=self._board.height,
            score=self._score,
            speed=self._speed,
            steps=self._steps,
            food=self._food_location,
            snake=self._snake.snapshot(),
            direction=self._direction,
            last_moved_direction=self._last_moved_direction,
            death_reason=self._snake.death_reason,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def update_direction(self, direction: Direction) -> None:
        """
        Request a new direction for the next step.

        The request is dropped if it matches, or reverses, either the pending
        direction or the direction of the last step. Reversing onto the
        second segment would be an instant loss, and checking both directions
        stops two quick turns between steps from doing the same.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, got {direction!r}")

        if (direction is self._direction or direction.is_opposite(self._direction) or
                direction is self._last_moved_direction or
                direction.is_opposite(self._last_moved_direction)):
            logger.debug(
                "Ignoring direction %s (pending %s, last moved %s)",
                direction.value, self._direction.value, self._last_moved_direction.value,
            )
            return

        self._direction = direction

    def tick(self) -> Status:
        """
        Perform one iteration of the game loop and return the game status.

        At most one step is executed per call; the throttle skips
        base_interval(speed) - 1 calls between steps.
        """
        if self._status is not Status.PLAYING or not self._tick_throttle():
            return self._status

        if not self._move_snake():
            self._status = Status.LOST
            logger.info(
                "Game lost (%s) at %s after %d steps. Score: %d, speed: %d",
                self._snake.death_reason, self._snake.head, self._steps, self._score, self._speed,
            )
            return self._status

        if self._snake.head == self._food_location:
            self._score += 1

            # Speed up every POINTS_PER_SPEED_UP points
            if self._score % POINTS_PER_SPEED_UP == 0:
                self._speed += 1

            self._food_location = self._food_placer.place(
                self._board, self._food_location, self._snake
            )
            self._should_elongate = True
            logger.info(
                "Food eaten at step %d. Score: %d, speed: %d, next food at %s",
                self._steps, self._score, self._speed, self._food_location,
            )

        return self._status

    def _tick_throttle(self) -> bool:
        """Return True if this tick should execute a step."""
        if self._throttle_count == 0:
            self._throttle_count = base_interval(self._speed) - 1
            return True

        self._throttle_count -= 1
        return False

    def _move_snake(self) -> bool:
        """
        Move the snake one cell in the pending direction.

        Returns False, leaving the body untouched, if the move crashes.
        """
        self._steps += 1
        head = self._snake.head
        next_head = head.offset(self._direction)

        reason = self._crash_reason(next_head)
        if reason is not None:
            self._snake.death_reason = reason
            self._snake.death_step = self._steps
            return False

        self._snake.grow_head(next_head)
        self._last_moved_direction = self._direction

        if not self._should_elongate:
            self._snake.drop_tail()
        self._should_elongate = False

        logger.debug("Step %d: %s -> %s", self._steps, head, next_head)
        return True

    def _crash_reason(self, next_head: Point) -> Optional[str]:
        if not self._board.in_bounds(next_head):
            return "wall"
        # The tail still counts: it has not moved yet.
        if self._board.occupied(next_head, self._snake):
            return "self"
        return None

    def __repr__(self):
        return (
            f"<GameEngine {self.width}x{self.height} status={self._status.value}, "
            f"score={self._score}, speed={self._speed}>"
        )
