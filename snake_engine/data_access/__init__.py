"""
Data access layer: persisted high scores.
"""

from .database import get_connection, get_database_path, init_database
from .memory import InMemoryHighScoreStore
from .repositories import HighScoreRepository

__all__ = [
    'get_connection',
    'get_database_path',
    'init_database',
    'InMemoryHighScoreStore',
    'HighScoreRepository',
]
