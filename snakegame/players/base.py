"""
Base player interface for the game engine.
"""

import random
from typing import List, Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player plays the part of an input device: given the current game
    state it returns the direction it wants the snake to take, or None to
    leave the pending direction alone.
    """

    name = "player"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep the current one
        """
        raise NotImplementedError


def safe_moves(game_state: GameState) -> List[Direction]:
    """
    Directions the snake can take next step without crashing.

    The reverse of the last move is never offered, since the engine would
    ignore it.
    """
    head = game_state.head
    body = set(game_state.snake)
    moves = []
    for direction in Direction:
        if direction.is_opposite(game_state.last_moved_direction):
            continue
        x, y = head.offset(direction)
        if not (0 <= x < game_state.width and 0 <= y < game_state.height):
            continue
        # The engine treats the tail as occupied too
        if (x, y) in body:
            continue
        moves.append(direction)
    return moves
