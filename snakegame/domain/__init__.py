"""
Domain entities for the snake engine.

This module contains the game primitives and entities that are independent
of the engine's orchestration and of any input or output layer.
"""

from .constants import (
    Status, Direction, VALID_MOVES, BASE_TICK_INTERVAL, POINTS_PER_SPEED_UP, base_interval,
)
from .point import Point
from .board import Board
from .snake import Snake
from .food import FoodPlacer
from .game_state import GameState

__all__ = [
    'Status', 'Direction', 'VALID_MOVES', 'BASE_TICK_INTERVAL', 'POINTS_PER_SPEED_UP',
    'base_interval',
    'Point',
    'Board',
    'Snake',
    'FoodPlacer',
    'GameState',
]
