"""
Session controller: owns the game lifecycle and the tick timer.

Every state transition completes before any collaborator (renderer, audio
sink, high-score store) is called, and collaborator failures are logged
and swallowed.
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from ..domain.constants import (
    BACKGROUND_START_CUE,
    BACKGROUND_STOP_CUE,
    EAT_CUE,
    GAME_OVER_CUE,
)
from ..domain.enums import Direction, GameStatus, TickOutcome
from ..domain.game_state import GameSnapshot, GameState
from ..domain.grid import Grid
from ..services.audio import NullAudioSink
from ..services.clock import SystemClock
from ..services.renderer import NullRenderer
from ..services.tick_timer import TickTimer
from .effect_manager import EffectManager
from .spawner import Spawner
from .speed import speed
from .tick import TickEngine, TickResult

logger = logging.getLogger(__name__)


class GameSession:
    """
    Manages:
      - Status transitions (idle, waiting, running, paused, over)
      - Direction input
      - The tick timer, re-armed whenever the interval may have changed
      - Current and high score
      - Notifying the renderer, audio sink and high-score store
    """

    def __init__(
        self,
        high_score_store=None,
        renderer=None,
        audio=None,
        timer: Optional[TickTimer] = None,
        clock: Optional[Callable[[], float]] = None,
        spawner: Optional[Spawner] = None,
        grid: Optional[Grid] = None,
        sound_enabled: bool = True,
    ):
        self.state = GameState(grid)
        self.clock = clock or SystemClock()
        self.timer = timer if timer is not None else TickTimer()
        self.spawner = spawner or Spawner(self.state.grid)
        self.effects = EffectManager()
        self.engine = TickEngine(self.spawner, self.effects, self.clock)

        self.high_score_store = high_score_store
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.audio = audio if audio is not None else NullAudioSink()
        self.sound_enabled = sound_enabled

        self.game_id = str(uuid.uuid4())
        self.high_score = self._load_high_score()
        self.last_result: Optional[TickResult] = None

        self.spawner.fill_to_capacity(self.state.snake.positions, self.state.foods)
        self._render()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def interval(self) -> float:
        return speed(self.state.score, self.state.active_effect)

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot(now=self.clock(), high_score=self.high_score)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Enter WAITING. The timer is armed by the first direction input.

        Returns:
            False if a game is already waiting, running or paused.
        """
        if self.status in (GameStatus.WAITING, GameStatus.RUNNING, GameStatus.PAUSED):
            return False

        if self.status is GameStatus.OVER:
            self._reset()

        self.state.status = GameStatus.WAITING
        logger.info("Game started, waiting for a direction...")
        self._cue(BACKGROUND_START_CUE)
        self._render()
        return True

    def handle_direction(self, direction: Direction) -> bool:
        """
        Apply a direction intent.

        While WAITING this starts the game with `direction` as both the
        applied and pending direction. While RUNNING a reversal of the
        last applied direction is ignored. Otherwise the input is ignored.

        Returns:
            True if the input was accepted.
        """
        if self.status is GameStatus.WAITING:
            self.state.snake.set_direction(direction)
            self.state.status = GameStatus.RUNNING
            self.timer.arm(self.interval, self.on_tick)
            logger.info(f"Game running, heading {direction.name} at {self.interval}ms")
            self._render()
            return True

        if self.status is GameStatus.RUNNING:
            return self.state.snake.queue_direction(direction)

        return False

    def pause(self) -> bool:
        if self.status is not GameStatus.RUNNING:
            return False
        self.state.status = GameStatus.PAUSED
        self.timer.cancel()
        logger.info("Game paused")
        self._render()
        return True

    def resume(self) -> bool:
        if self.status is not GameStatus.PAUSED:
            return False
        self.state.status = GameStatus.RUNNING
        self.timer.arm(self.interval, self.on_tick)
        logger.info("Game resumed")
        self._render()
        return True

    def toggle_pause(self) -> bool:
        if self.status is GameStatus.PAUSED:
            return self.resume()
        return self.pause()

    def restart(self) -> None:
        """Hard reset of every entity back to IDLE, whatever the status."""
        was_in_progress = self.status.in_progress
        self._reset()
        if was_in_progress:
            self._cue(BACKGROUND_STOP_CUE)
        logger.info("Game restarted")
        self._render()

    def toggle_sound(self) -> bool:
        """Flip sound on or off and return the new setting."""
        if self.sound_enabled:
            self._cue(BACKGROUND_STOP_CUE)
            self.sound_enabled = False
        else:
            self.sound_enabled = True
            if self.status.in_progress:
                self._cue(BACKGROUND_START_CUE)
        logger.info(f"Sound {'on' if self.sound_enabled else 'off'}")
        return self.sound_enabled

    # ------------------------------------------------------------------
    # Tick handling
    # ------------------------------------------------------------------

    def on_tick(self) -> Optional[TickResult]:
        """
        Timer callback. Ticks outside RUNNING are ignored.
        """
        if self.status is not GameStatus.RUNNING:
            logger.debug(f"Ignoring tick in status '{self.status.value}'")
            return None

        previous_interval = self.timer.interval_ms
        result = self.engine.advance(self.state)
        self.last_result = result

        if result.outcome is TickOutcome.ENDED:
            self.on_ended()
            return result

        if result.outcome is TickOutcome.SCORED:
            self._cue(EAT_CUE)

        if result.outcome is TickOutcome.SCORED or result.effect_changed:
            interval = self.interval
            self.timer.arm(interval, self.on_tick)
            if interval != previous_interval:
                logger.info(f"Score: {self.state.score}, current speed: {interval}ms")

        self._render()
        return result

    def on_ended(self) -> None:
        self.state.status = GameStatus.OVER
        self.timer.cancel()
        logger.info(
            f"Game over ({self.state.snake.death_reason}), final score: {self.state.score}"
        )

        if self.state.score > self.high_score:
            self.high_score = self.state.score
            logger.info(f"New high score: {self.high_score}")
            self._store_high_score(self.high_score)

        self._cue(BACKGROUND_STOP_CUE)
        self._cue(GAME_OVER_CUE)
        self._render()

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "status": self.status.value,
            "final_score": self.state.score,
            "high_score": self.high_score,
            "snake_length": len(self.state.snake),
            "ticks": self.state.tick_count,
            "death_reason": self.state.snake.death_reason,
            "final_state": self.snapshot().to_dict(),
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self.timer.cancel()
        self.state.reset()
        self.last_result = None
        self.game_id = str(uuid.uuid4())
        self.spawner.fill_to_capacity(self.state.snake.positions, self.state.foods)

    def _load_high_score(self) -> int:
        if self.high_score_store is None:
            return 0
        try:
            return int(self.high_score_store.get() or 0)
        except Exception as e:
            logger.warning(f"Could not read high score: {e}")
            return 0

    def _store_high_score(self, score: int) -> None:
        if self.high_score_store is None:
            return
        try:
            self.high_score_store.set(score)
        except Exception as e:
            logger.warning(f"Could not persist high score {score}: {e}")

    def _cue(self, cue: str) -> None:
        if not self.sound_enabled:
            return
        try:
            self.audio.play(cue)
        except Exception as e:
            logger.warning(f"Audio cue '{cue}' failed: {e}")

    def _render(self) -> None:
        try:
            self.renderer.render(self.snapshot())
        except Exception as e:
            logger.warning(f"Renderer failed: {e}")
