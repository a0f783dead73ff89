"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, Optional, Tuple

from .constants import Direction, Status
from .point import Point


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        status: running state of the game
        width, height: board dimensions
        score: food eaten so far
        speed: current speed level (1 and up)
        steps: simulation steps executed since the last reset
        food: (x, y) of the food
        snake: tuple of (x, y) from head to tail
        direction: direction the next step will take
        last_moved_direction: direction taken by the most recent step
        death_reason: 'wall' or 'self' once the game is lost
    """

    def __init__(
        self,
        status: Status,
        width: int,
        height: int,
        score: int,
        speed: int,
        steps: int,
        food: Point,
        snake: Tuple[Point, ...],
        direction: Direction,
        last_moved_direction: Direction,
        death_reason: Optional[str] = None
    ):
        self.status = status
        self.width = width
        self.height = height
        self.score = score
        self.speed = speed
        self.steps = steps
        self.food = food
        self.snake = snake
        self.direction = direction
        self.last_moved_direction = last_moved_direction
        self.death_reason = death_reason

    @property
    def head(self) -> Point:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        (0,0) is the top left cell, y grows downwards.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        # x-axis labels, last digit only so columns stay aligned
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (points become [x, y] lists)."""
        return {
            "status": self.status.value,
            "width": self.width,
            "height": self.height,
            "score": self.score,
            "speed": self.speed,
            "steps": self.steps,
            "food": list(self.food),
            "snake": [list(p) for p in self.snake],
            "direction": self.direction.value,
            "last_moved_direction": self.last_moved_direction.value,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, steps={self.steps}, "
            f"score={self.score}, speed={self.speed}, food={tuple(self.food)}>"
        )
