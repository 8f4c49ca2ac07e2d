"""
Square bounded grid and the Position value type.
"""

from dataclasses import dataclass
from typing import NamedTuple

from .constants import GRID_COUNT
from .enums import Direction


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class Grid:
    """A `count` x `count` board with (0, 0) at the top left."""

    count: int = GRID_COUNT

    def __post_init__(self):
        if self.count <= 0:
            raise ValueError(f"Grid count must be positive, got {self.count}")

    def contains(self, position) -> bool:
        x, y = position
        return 0 <= x < self.count and 0 <= y < self.count
