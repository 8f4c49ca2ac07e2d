"""
Greedy player - heads for the nearest food along safe moves.
"""

from ..domain.enums import Direction
from ..domain.game_state import GameSnapshot
from .base import Player


class GreedyPlayer(Player):

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        valid_moves = self.safe_moves(snapshot)
        if not valid_moves:
            return snapshot.direction
        if not snapshot.foods:
            return snapshot.direction if snapshot.direction in valid_moves else valid_moves[0]

        def distance_after(direction: Direction) -> int:
            x, y = snapshot.head.moved(direction)
            return min(abs(x - fx) + abs(y - fy) for fx, fy in (f.position for f in snapshot.foods))

        # Ties keep the current heading when possible
        return min(valid_moves, key=lambda d: (distance_after(d), d is not snapshot.direction))
