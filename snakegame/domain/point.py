"""
Point value type - a cell coordinate on the board.
"""

from typing import NamedTuple

from .constants import Direction


class Point(NamedTuple):
    """A grid cell addressed by integer (x, y)."""

    x: int
    y: int

    def offset(self, direction: Direction) -> "Point":
        # May go negative; Board.in_bounds rejects those points.
        dx, dy = direction.offset
        return Point(self.x + dx, self.y + dy)
