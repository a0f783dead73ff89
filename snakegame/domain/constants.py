"""
Game constants for the snake engine.
"""

from enum import Enum
from typing import Tuple


class Status(Enum):
    """Running state of a game."""

    NEW = "NEW"
    PLAYING = "PLAYING"
    LOST = "LOST"


class Direction(Enum):
    """
    A facing or moving direction on the board.

    Y grows downwards: UP is y - 1 and DOWN is y + 1.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) applied to a point moving one cell in this direction."""
        return OFFSETS[self]

    def is_opposite(self, other: "Direction") -> bool:
        return OPPOSITES[self] is other

    @classmethod
    def parse(cls, raw: str) -> "Direction":
        """
        Convert a direction name such as "up" or "LEFT" to a Direction.

        Raises:
            ValueError: If the name is not one of UP, DOWN, LEFT, RIGHT.
        """
        name = str(raw).strip().upper()
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Invalid direction {raw!r}. Valid directions: {valid}") from None


OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

VALID_MOVES = frozenset(Direction)

# Game settings
START_SPEED = 1
START_DIRECTION = Direction.RIGHT
BASE_TICK_INTERVAL = 10   # ticks per step at START_SPEED
POINTS_PER_SPEED_UP = 5
MIN_BOARD_WIDTH = 4       # room for the two starting cells and the food
MIN_BOARD_HEIGHT = 1


def base_interval(speed: int) -> int:
    """Number of tick() calls per executed step at the given speed."""
    return max(1, BASE_TICK_INTERVAL - (speed - START_SPEED))
