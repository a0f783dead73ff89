"""
Registry for player implementations.

Maps player keys (as accepted on the command line) to player classes.
"""

from typing import Dict, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

# Canonical list of available player keys
AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'greedy'. If None or empty, returns the random player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "random"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]
