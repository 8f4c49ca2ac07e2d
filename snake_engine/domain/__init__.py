"""
Domain entities for the snake engine.

This module contains the core game entities that are independent of
infrastructure concerns (timers, audio, storage, etc.).
"""

from .enums import Direction, GameStatus, PowerUpKind, TickOutcome
from .grid import Grid, Position
from .snake import Snake
from .food import Food, ScoreFood, PowerUpFood
from .effects import ActiveEffect, FlashState
from .game_state import GameState, GameSnapshot

__all__ = [
    'Direction', 'GameStatus', 'PowerUpKind', 'TickOutcome',
    'Grid', 'Position',
    'Snake',
    'Food', 'ScoreFood', 'PowerUpFood',
    'ActiveEffect', 'FlashState',
    'GameState',
    'GameSnapshot',
]
