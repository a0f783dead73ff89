"""
Board geometry - bounds and collision tests for a fixed-size grid.
"""

from typing import Iterable, Iterator, Tuple

from .point import Point


class Board:
    """
    The play area: cells (x, y) with 0 <= x < width and 0 <= y < height.

    Attributes:
        width, height: board dimensions, fixed for the board's lifetime
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def in_bounds(self, point: Tuple[int, int]) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    @staticmethod
    def occupied(point: Tuple[int, int], body: Iterable[Tuple[int, int]]) -> bool:
        """Return True if point is one of the body cells."""
        return any(point == cell for cell in body)

    def cells(self) -> Iterator[Point]:
        """Yield every cell row by row, top row first."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
