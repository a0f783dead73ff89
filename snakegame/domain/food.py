"""
Food placement.

A new food cell is chosen by rejection sampling: random cells are drawn until
one lies in a different row AND a different column from the current food and
is not covered by the snake. Sampling is capped; once the cap is hit the board
is scanned row by row so a nearly full board can never spin forever.
"""

import logging
import random
from typing import Iterable, Optional

from .board import Board
from .point import Point

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


class FoodPlacer:
    """
    Picks food locations using an injectable random source.

    Attributes:
        rng: any object with a random.Random style randrange(n) method
        max_attempts: random draws tried before falling back to a scan
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def place(self, board: Board, current: Point, body: Iterable[Point]) -> Point:
        """
        Return the next food location.

        Args:
            board: the play area
            current: the food location being replaced
            body: the snake's cells, none of which may receive the food

        Returns:
            The new location. If the snake covers every other cell the
            current location is returned unchanged.
        """
        occupied = set(body)

        for _ in range(self.max_attempts):
            x = self.rng.randrange(board.width)
            y = self.rng.randrange(board.height)
            if x == current.x or y == current.y:
                continue
            candidate = Point(x, y)
            if candidate in occupied:
                continue
            return candidate

        logger.warning(
            "No food location found after %d random draws on %s, scanning the board",
            self.max_attempts, board,
        )
        return self._scan(board, current, occupied)

    @staticmethod
    def _scan(board: Board, current: Point, occupied: set) -> Point:
        fallback = None
        for cell in board.cells():
            if cell in occupied or cell == current:
                continue
            if cell.x != current.x and cell.y != current.y:
                return cell
            if fallback is None:
                fallback = cell

        if fallback is not None:
            return fallback

        logger.warning("Board is full, food stays at %s", current)
        return current
