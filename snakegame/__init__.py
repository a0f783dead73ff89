"""
snakegame - a call-driven simulation engine for the classic snake game.
"""

from .domain import Direction, GameState, Point, Status
from .engine import GameEngine

__version__ = "0.1.0"

__all__ = [
    'GameEngine',
    'GameState',
    'Direction',
    'Point',
    'Status',
]
