"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Tuple

from .point import Point


class Snake:
    """
    Represents the snake's body on the board.

    Attributes:
        positions: deque of Points from head at index 0 to tail at the end
        death_reason: 'wall' or 'self' once the snake has crashed
        death_step: the step number on which the snake crashed
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Point(x, y) for x, y in positions)
        self.death_reason: Optional[str] = None
        self.death_step: Optional[int] = None

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Point:
        return self.positions[-1]

    def grow_head(self, point: Point) -> None:
        """Prepend a new head cell."""
        self.positions.appendleft(point)

    def drop_tail(self) -> Point:
        """Remove and return the tail cell."""
        return self.positions.pop()

    def snapshot(self) -> Tuple[Point, ...]:
        """Head-first copy of the body that callers may keep."""
        return tuple(self.positions)

    def __contains__(self, point) -> bool:
        return point in self.positions

    def __iter__(self) -> Iterator[Point]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head}>"
