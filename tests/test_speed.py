"""
Tests for the speed controller.
"""

import pytest

from snake_engine.domain import ActiveEffect, PowerUpKind
from snake_engine.engine import base_interval, speed


def effect(kind):
    return ActiveEffect(kind, started_at=0, expires_at=10_000)


class TestBaseInterval:

    @pytest.mark.parametrize("score, expected", [
        (0, 150),
        (4, 150),
        (5, 148),
        (9, 148),
        (10, 146),
        (174, 82),
        (175, 80),
        (1000, 80),
    ])
    def test_steps_and_floor(self, score, expected):
        assert base_interval(score) == expected


class TestSpeed:

    def test_no_effect_uses_base(self):
        assert speed(0) == 150
        assert speed(0, None) == 150

    def test_threshold_crossing_from_four_to_five(self):
        assert speed(4) == 150
        assert speed(5) == 148

    def test_speed_boost(self):
        # base = 150 - 2 * 2 = 146
        assert speed(10, effect(PowerUpKind.SPEED)) == pytest.approx(87.6)

    def test_speed_boost_is_floored_at_fifty(self):
        # base at the minimum speed is 80; 80 * 0.6 = 48
        assert speed(1000, effect(PowerUpKind.SPEED)) == 50

    def test_slow_motion(self):
        assert speed(0, effect(PowerUpKind.SLOW)) == pytest.approx(225)
        assert speed(1000, effect(PowerUpKind.SLOW)) == pytest.approx(120)

    def test_invincible_does_not_change_speed(self):
        assert speed(10, effect(PowerUpKind.INVINCIBLE)) == 146
