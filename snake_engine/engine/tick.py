"""
Tick engine: the per-step transition of a running game.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.effects import ActiveEffect
from ..domain.enums import GameStatus, TickOutcome
from ..domain.food import Food
from ..domain.game_state import GameState
from .effect_manager import EffectManager
from .spawner import Spawner

logger = logging.getLogger(__name__)


class EngineStateError(RuntimeError):
    """Raised when the engine is advanced outside the RUNNING status."""


@dataclass(frozen=True)
class TickResult:
    """
    What happened during one tick.

    Attributes:
        outcome: CONTINUED, SCORED or ENDED
        points: points awarded this tick
        eaten: the consumed item, if any
        activated: effect activated this tick, if any
        expired: effect that expired at the start of this tick, if any
        frozen: True when invincibility absorbed a collision and the snake did not move
        death_reason: 'wall' or 'self' when the tick ended the game
    """

    outcome: TickOutcome
    points: int = 0
    eaten: Optional[Food] = None
    activated: Optional[ActiveEffect] = None
    expired: Optional[ActiveEffect] = None
    frozen: bool = False
    death_reason: Optional[str] = None

    @property
    def effect_changed(self) -> bool:
        return self.activated is not None or self.expired is not None


class TickEngine:
    """
    Advances a GameState by one step.

    The state is mutated in place; the returned TickResult reports the
    outcome. The status is only moved to OVER by the session.
    """

    def __init__(self, spawner: Spawner, effects: EffectManager, clock: Callable[[], float]):
        self.spawner = spawner
        self.effects = effects
        self.clock = clock

    def advance(self, state: GameState) -> TickResult:
        if state.status is not GameStatus.RUNNING:
            raise EngineStateError(f"Cannot advance a game in status '{state.status.value}'")

        now = self.clock()
        snake = state.snake
        state.tick_count += 1

        # 1) Effect expiry runs before movement
        expired = self.effects.expire_effect(state, now)

        # 2) Commit the queued direction and compute the new head
        snake.commit_direction()
        head = snake.next_head()

        # 3) Collisions are evaluated before anything is committed
        if not state.grid.contains(head):
            collision = "wall"
        elif snake.occupies(head):
            collision = "self"
        else:
            collision = None

        if collision is not None:
            if self.effects.is_invincible(state):
                logger.debug(f"Invincible: ignoring {collision} collision at {tuple(head)}")
                return TickResult(TickOutcome.CONTINUED, expired=expired, frozen=True)
            snake.death_reason = collision
            return TickResult(TickOutcome.ENDED, expired=expired, death_reason=collision)

        # 4) Move: add the head, grow by the food's extra segments, drop the tail
        snake.push_head(head)
        index = state.food_index_at(head)
        eaten = None
        activated = None
        if index is not None:
            eaten = state.foods.pop(index)
            snake.grow(eaten.growth)
        snake.drop_tail()

        if eaten is not None:
            activated = self._consume(state, eaten, now)

        # 5) Flash window runs on its own clock
        self.effects.update_flash(state, now)

        if eaten is None:
            return TickResult(TickOutcome.CONTINUED, expired=expired)
        return TickResult(
            TickOutcome.SCORED,
            points=eaten.points,
            eaten=eaten,
            activated=activated,
            expired=expired,
        )

    def _consume(self, state: GameState, food: Food, now: float) -> Optional[ActiveEffect]:
        state.score += food.points
        activated = None
        if food.is_power_up:
            activated = self.effects.activate(state, food.kind, now)
        else:
            logger.debug(f"Ate {food.value}-point food, score {state.score}")

        self.spawner.fill_to_capacity(state.snake.positions, state.foods)
        return activated
