"""
Speed controller: maps score and the active effect to a tick interval.
"""

from typing import Optional

from ..domain.constants import (
    BASE_SPEED,
    MIN_SPEED,
    SCORE_PER_SPEED_STEP,
    SLOW_MOTION_FACTOR,
    SPEED_BOOST_FACTOR,
    SPEED_BOOST_FLOOR,
    SPEED_INCREMENT,
)
from ..domain.effects import ActiveEffect
from ..domain.enums import PowerUpKind


def base_interval(score: int) -> int:
    """Interval before effects: 2 ms faster every 5 points, never below MIN_SPEED."""
    interval = BASE_SPEED - (score // SCORE_PER_SPEED_STEP) * SPEED_INCREMENT
    return max(MIN_SPEED, interval)


def speed(score: int, active_effect: Optional[ActiveEffect] = None) -> float:
    """
    Return the tick interval in milliseconds.

    Args:
        score: current score
        active_effect: running power-up, if any

    Returns:
        Interval in ms. Speed boost scales by 0.6 (floored at 50 ms),
        slow motion by 1.5; invincibility leaves the interval unchanged.
    """
    interval = base_interval(score)
    if active_effect is None:
        return interval

    if active_effect.kind is PowerUpKind.SPEED:
        return max(SPEED_BOOST_FLOOR, interval * SPEED_BOOST_FACTOR)
    if active_effect.kind is PowerUpKind.SLOW:
        return interval * SLOW_MOTION_FACTOR
    return interval
