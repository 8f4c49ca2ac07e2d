"""
Consumable items: score tiers and timed power-ups.
"""

from dataclasses import dataclass
from typing import Union

from .constants import FOOD_TIERS, POWER_UPS, POWER_UP_POINTS
from .enums import PowerUpKind
from .grid import Position


@dataclass(frozen=True)
class ScoreFood:
    """
    A food item worth `value` points that also grows the snake by
    `value - 1` extra segments.
    """

    position: Position
    value: int

    is_power_up = False

    def __post_init__(self):
        if self.value not in FOOD_TIERS:
            raise ValueError(f"Unknown food value {self.value}; expected one of {sorted(FOOD_TIERS)}")

    @property
    def points(self) -> int:
        return self.value

    @property
    def growth(self) -> int:
        return self.value - 1

    @property
    def colour(self) -> str:
        return FOOD_TIERS[self.value][0]

    @property
    def size(self) -> float:
        return FOOD_TIERS[self.value][1]

    @property
    def symbol(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PowerUpFood:
    """A food item that activates a timed effect instead of growing the snake."""

    position: Position
    kind: PowerUpKind

    is_power_up = True
    points = POWER_UP_POINTS
    growth = 0

    @property
    def duration(self) -> int:
        return POWER_UPS[self.kind.value][0]

    @property
    def colour(self) -> str:
        return POWER_UPS[self.kind.value][1]

    @property
    def label(self) -> str:
        return POWER_UPS[self.kind.value][2]

    @property
    def symbol(self) -> str:
        return POWER_UPS[self.kind.value][3]


Food = Union[ScoreFood, PowerUpFood]
