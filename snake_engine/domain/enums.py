"""
Enumerations shared by the entity model and the engine.
"""

from enum import Enum

from .constants import UP, DOWN, LEFT, RIGHT, SPEED, SLOW, INVINCIBLE


class Direction(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite


class PowerUpKind(str, Enum):
    SPEED = SPEED
    SLOW = SLOW
    INVINCIBLE = INVINCIBLE


class GameStatus(str, Enum):
    """
    Session lifecycle.

    IDLE -> WAITING on start, WAITING -> RUNNING on the first direction,
    RUNNING <-> PAUSED, RUNNING -> OVER on a fatal collision, and any
    status -> IDLE on restart.
    """

    IDLE = "idle"
    WAITING = "waiting"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"

    @property
    def in_progress(self) -> bool:
        return self in (GameStatus.WAITING, GameStatus.RUNNING, GameStatus.PAUSED)


class TickOutcome(str, Enum):
    CONTINUED = "continued"
    SCORED = "scored"
    ENDED = "ended"
