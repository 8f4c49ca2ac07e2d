"""
High-score repository.
"""

import logging

from .base import BaseRepository

logger = logging.getLogger(__name__)

DEFAULT_BOARD = 'classic'


class HighScoreRepository(BaseRepository):
    """
    Persistent high score, one row per board name.

    `set` never lowers a stored score, so the value is monotonic even if
    two sessions report out of order.
    """

    def __init__(self, db_path=None, board: str = DEFAULT_BOARD):
        super().__init__(db_path)
        self.board = board

    def get(self) -> int:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT score FROM high_scores WHERE name = ?", (self.board,))
            row = cursor.fetchone()
        return int(row["score"]) if row else 0

    def set(self, score: int) -> None:
        if score < 0:
            raise ValueError(f"High score cannot be negative: {score}")
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO high_scores (name, score, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(name) DO UPDATE SET
                    score = MAX(high_scores.score, excluded.score),
                    updated_at = CURRENT_TIMESTAMP
                """,
                (self.board, score),
            )
        logger.info(f"Stored high score {score} for board '{self.board}'")

    def reset(self) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM high_scores WHERE name = ?", (self.board,))
        logger.info(f"High score reset for board '{self.board}'")
