"""
Greedy player - heads straight for the food.
"""

from typing import List, Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState
from .base import Player, safe_moves


class GreedyPlayer(Player):
    """
    Moves toward the food, closing the larger of the x/y gaps first.

    Falls back to a random safe direction when the direct routes are blocked,
    and returns None when nothing is safe.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        valid_moves = safe_moves(game_state)
        if not valid_moves:
            return None

        for direction in self._preferred(game_state):
            if direction in valid_moves:
                return direction

        return self.rng.choice(valid_moves)

    @staticmethod
    def _preferred(game_state: GameState) -> List[Direction]:
        hx, hy = game_state.head
        fx, fy = game_state.food
        dx, dy = fx - hx, fy - hy

        horizontal = Direction.RIGHT if dx > 0 else Direction.LEFT
        vertical = Direction.DOWN if dy > 0 else Direction.UP

        preferred = []
        if abs(dx) >= abs(dy):
            if dx:
                preferred.append(horizontal)
            if dy:
                preferred.append(vertical)
        else:
            preferred.append(vertical)
            if dx:
                preferred.append(horizontal)
        return preferred
