"""
Player implementations for the snake engine.

Players stand in for an input device: they look at a GameState snapshot and
request a direction, which the driver forwards to GameEngine.update_direction.
"""

from .base import Player, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .registry import get_player_class, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'AVAILABLE_PLAYERS',
]
