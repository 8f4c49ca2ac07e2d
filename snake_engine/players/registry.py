"""
Registry for player implementations.

Maps player keys (e.g., 'random', 'greedy') to player classes. To add a
player, create a module with a Player subclass and add a loader here.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

DEFAULT_PLAYER = "greedy"

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        key: One of AVAILABLE_PLAYERS. If None or empty, returns the default.

    Raises:
        ValueError: If key is not recognized.
    """
    if not key or key.strip() == "":
        key = DEFAULT_PLAYER

    key = key.strip().lower()

    if key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{key}'. Available players: {available}")

    return PLAYER_LOADERS[key]()


def list_players() -> List[Dict[str, str]]:
    return [
        {"key": "random", "description": "Random safe moves"},
        {"key": "greedy", "description": "Shortest Manhattan step toward the nearest food"},
    ]
