"""
Grid snake simulation engine.
"""

from .domain import Direction, GameSnapshot, GameState, GameStatus, PowerUpKind, TickOutcome
from .engine import GameSession, TickEngine, speed

__version__ = "0.1.0"

__all__ = [
    'Direction',
    'GameSnapshot',
    'GameState',
    'GameStatus',
    'PowerUpKind',
    'TickOutcome',
    'GameSession',
    'TickEngine',
    'speed',
]
