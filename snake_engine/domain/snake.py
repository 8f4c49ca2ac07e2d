"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .enums import Direction
from .grid import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        direction: direction applied on the last tick
        pending_direction: direction queued by input for the next tick
        death_reason: 'wall' or 'self' once a fatal collision happened
    """

    def __init__(self, positions: Iterable[Tuple[int, int]], direction: Direction = Direction.RIGHT):
        self.positions = deque(Position(*p) for p in positions)
        self.direction = direction
        self.pending_direction = direction
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, position) -> bool:
        return tuple(position) in self.positions

    def queue_direction(self, direction: Direction) -> bool:
        """
        Queue a direction for the next tick.

        A direction that reverses the one applied on the last tick is
        rejected here, at input time. The latest accepted input wins.

        Returns:
            True if the direction was accepted
        """
        if direction.is_opposite(self.direction):
            return False
        self.pending_direction = direction
        return True

    def set_direction(self, direction: Direction) -> None:
        """Force both the applied and the pending direction."""
        self.direction = direction
        self.pending_direction = direction

    def commit_direction(self) -> Direction:
        self.direction = self.pending_direction
        return self.direction

    def next_head(self) -> Position:
        return self.head.moved(self.direction)

    def push_head(self, head: Position) -> None:
        self.positions.appendleft(head)

    def drop_tail(self) -> Position:
        return self.positions.pop()

    def grow(self, segments: int) -> None:
        """Duplicate the tail position `segments` times."""
        tail = self.tail
        for _ in range(segments):
            self.positions.append(tail)
