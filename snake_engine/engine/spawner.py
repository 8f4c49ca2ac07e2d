"""
Rejection-sampling placement of food and power-up items.
"""

import logging
import random
from typing import Iterable, List, Optional, Sequence

from ..domain.constants import (
    FOOD_TIERS,
    MAX_FOODS,
    MAX_SPAWN_ATTEMPTS,
    POWER_UP_PROBABILITY,
)
from ..domain.enums import PowerUpKind
from ..domain.food import Food, PowerUpFood, ScoreFood
from ..domain.grid import Grid, Position

logger = logging.getLogger(__name__)


class Spawner:
    """
    Places items on free cells.

    Randomness comes from `rng` (an unseeded random.Random by default);
    pass a seeded generator for reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_SPAWN_ATTEMPTS,
        power_up_probability: float = POWER_UP_PROBABILITY,
    ):
        self.grid = grid
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.power_up_probability = power_up_probability
        self._tiers = sorted(FOOD_TIERS)
        self._kinds = list(PowerUpKind)

    def _draw(self) -> Food:
        if self.rng.random() < self.power_up_probability:
            kind = self.rng.choice(self._kinds)
            return PowerUpFood(self._random_cell(), kind)
        value = self.rng.choice(self._tiers)
        return ScoreFood(self._random_cell(), value)

    def _random_cell(self) -> Position:
        return Position(self.rng.randrange(self.grid.count), self.rng.randrange(self.grid.count))

    def place_item(self, snake: Iterable[Sequence[int]], foods: Sequence[Food]) -> Optional[Food]:
        """
        Draw candidates until one lands on a free cell.

        Args:
            snake: occupied snake cells
            foods: items already on the board

        Returns:
            The accepted item, or None when every attempt hit an occupied
            cell. The caller decides whether to keep it.
        """
        occupied = {tuple(p) for p in snake}
        occupied.update(tuple(food.position) for food in foods)

        for _ in range(self.max_attempts):
            candidate = self._draw()
            if tuple(candidate.position) not in occupied:
                return candidate

        logger.debug(f"No free cell found after {self.max_attempts} attempts; skipping spawn")
        return None

    def fill_to_capacity(
        self,
        snake: Iterable[Sequence[int]],
        foods: List[Food],
        max_foods: int = MAX_FOODS,
    ) -> List[Food]:
        """
        Append items to `foods` until it holds `max_foods` or a spawn is skipped.

        Returns:
            The items that were added.
        """
        snake = list(snake)
        added: List[Food] = []
        while len(foods) < max_foods:
            item = self.place_item(snake, foods)
            if item is None:
                break
            foods.append(item)
            added.append(item)
            if item.is_power_up:
                logger.debug(f"Spawned power-up {item.label} at {tuple(item.position)}")
            else:
                logger.debug(f"Spawned {item.value}-point food at {tuple(item.position)}")
        return added
