"""
Base player interface: an input source producing direction intents.
"""

from typing import List

from ..domain.enums import Direction
from ..domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for player logic.

    Each player returns a direction intent given the current snapshot.
    """

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        """
        Return a direction given the current snapshot.

        Args:
            snapshot: Current read-only view of the game

        Returns:
            One of Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError

    @staticmethod
    def safe_moves(snapshot: GameSnapshot) -> List[Direction]:
        """
        Directions that avoid walls, every body cell and reversing into the
        neck. The tail counts: collisions are checked before it moves.
        """
        body = snapshot.snake
        moves: List[Direction] = []
        for direction in Direction:
            if direction.is_opposite(snapshot.direction):
                continue
            target = snapshot.head.moved(direction)
            x, y = target
            # Check wall collisions
            if not (0 <= x < snapshot.grid_count and 0 <= y < snapshot.grid_count):
                continue
            # Check self collisions, tail included
            if target in body:
                continue
            moves.append(direction)
        return moves
