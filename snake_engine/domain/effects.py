"""
Timed status entities: the active power-up and the flash warning window.
"""

from dataclasses import dataclass

from .constants import FLASH_BLINK_PERIOD, POWER_UPS
from .enums import PowerUpKind


@dataclass(frozen=True)
class ActiveEffect:
    kind: PowerUpKind
    started_at: float
    expires_at: float

    @property
    def duration(self) -> float:
        return self.expires_at - self.started_at

    @property
    def label(self) -> str:
        return POWER_UPS[self.kind.value][2]

    def remaining(self, now: float) -> float:
        return max(0.0, self.expires_at - now)

    def progress(self, now: float) -> float:
        """Remaining time as a percentage of the full duration."""
        if self.duration <= 0:
            return 0.0
        return self.remaining(now) / self.duration * 100


@dataclass
class FlashState:
    active: bool = False
    ends_at: float = 0

    def is_visible(self, now: float) -> bool:
        """Body segments blink every FLASH_BLINK_PERIOD ms until `ends_at` has passed."""
        if not self.active or now > self.ends_at:
            return True
        return int(now // FLASH_BLINK_PERIOD) % 2 == 0
