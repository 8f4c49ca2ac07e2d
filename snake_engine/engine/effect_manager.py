"""
Activation and expiry of timed power-ups and the flash warning window.
"""

import logging
from typing import Dict, Optional

from ..domain.constants import FLASH_DURATION, POWER_UPS
from ..domain.effects import ActiveEffect, FlashState
from ..domain.enums import PowerUpKind
from ..domain.game_state import GameState

logger = logging.getLogger(__name__)


class EffectManager:
    """
    Owns the effect rules for a GameState.

    At most one effect is active; a new activation replaces the old one
    outright. Every activation restarts a fixed-length flash window that
    runs on its own clock, independent of the effect duration.
    """

    def __init__(
        self,
        durations: Optional[Dict[PowerUpKind, int]] = None,
        flash_duration: int = FLASH_DURATION,
    ):
        self.durations = durations or {kind: POWER_UPS[kind.value][0] for kind in PowerUpKind}
        self.flash_duration = flash_duration

    def activate(self, state: GameState, kind: PowerUpKind, now: float) -> ActiveEffect:
        effect = ActiveEffect(kind=kind, started_at=now, expires_at=now + self.durations[kind])
        if state.active_effect is not None:
            logger.info(f"Replacing {state.active_effect.kind.value} with {kind.value}")
        state.active_effect = effect
        state.flash = FlashState(active=True, ends_at=now + self.flash_duration)
        logger.info(f"Power-up activated: {effect.label} for {self.durations[kind]}ms")
        return effect

    def deactivate(self, state: GameState) -> Optional[ActiveEffect]:
        """Clear the active effect. The flash window is left alone."""
        effect = state.active_effect
        state.active_effect = None
        if effect is not None:
            logger.info(f"Power-up ended: {effect.label}")
        return effect

    def expire_effect(self, state: GameState, now: float) -> Optional[ActiveEffect]:
        """Deactivate the effect once `now` is past its expiry; return it if so."""
        effect = state.active_effect
        if effect is not None and now > effect.expires_at:
            return self.deactivate(state)
        return None

    def update_flash(self, state: GameState, now: float) -> bool:
        """Close the flash window once `now` is past its end; return True if closed."""
        if state.flash.active and now > state.flash.ends_at:
            state.flash = FlashState()
            logger.debug("Flash ended")
            return True
        return False

    def tick(self, state: GameState, now: float) -> Optional[ActiveEffect]:
        self.update_flash(state, now)
        return self.expire_effect(state, now)

    def is_invincible(self, state: GameState) -> bool:
        effect = state.active_effect
        return effect is not None and effect.kind is PowerUpKind.INVINCIBLE
