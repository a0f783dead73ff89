"""
Random player implementation - picks random safe moves.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        valid_moves = safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)
