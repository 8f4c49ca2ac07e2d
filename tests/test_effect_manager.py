"""
Tests for power-up activation, expiry and the flash window.
"""

import pytest

from snake_engine.domain import GameState, PowerUpKind
from snake_engine.engine import EffectManager


@pytest.fixture
def manager():
    return EffectManager()


@pytest.fixture
def state():
    return GameState()


class TestActivate:

    @pytest.mark.parametrize("kind, duration", [
        (PowerUpKind.SPEED, 5000),
        (PowerUpKind.SLOW, 7000),
        (PowerUpKind.INVINCIBLE, 3000),
    ])
    def test_sets_expiry_per_kind(self, manager, state, kind, duration):
        effect = manager.activate(state, kind, now=1000)
        assert state.active_effect is effect
        assert effect.kind is kind
        assert effect.expires_at == 1000 + duration

    def test_starts_flash_window(self, manager, state):
        manager.activate(state, PowerUpKind.SPEED, now=1000)
        assert state.flash.active is True
        assert state.flash.ends_at == 2500

    def test_replaces_existing_effect(self, manager, state):
        manager.activate(state, PowerUpKind.SLOW, now=0)
        manager.activate(state, PowerUpKind.INVINCIBLE, now=2000)
        assert state.active_effect.kind is PowerUpKind.INVINCIBLE
        assert state.active_effect.expires_at == 5000

    def test_resets_in_progress_flash(self, manager, state):
        manager.activate(state, PowerUpKind.SLOW, now=0)
        manager.activate(state, PowerUpKind.SPEED, now=1000)
        assert state.flash.ends_at == 2500


class TestDeactivate:

    def test_clears_effect_but_not_flash(self, manager, state):
        manager.activate(state, PowerUpKind.SPEED, now=0)
        old = manager.deactivate(state)
        assert old.kind is PowerUpKind.SPEED
        assert state.active_effect is None
        assert state.flash.active is True

    def test_deactivate_without_effect(self, manager, state):
        assert manager.deactivate(state) is None


class TestExpiry:

    def test_effect_expires_strictly_after_deadline(self, manager, state):
        manager.activate(state, PowerUpKind.INVINCIBLE, now=0)
        assert manager.expire_effect(state, 3000) is None
        assert state.active_effect is not None
        expired = manager.expire_effect(state, 3001)
        assert expired.kind is PowerUpKind.INVINCIBLE
        assert state.active_effect is None

    def test_flash_is_independent_of_effect_duration(self, manager, state):
        """Invincible lasts 3000ms but only flashes for the first 1500ms."""
        manager.activate(state, PowerUpKind.INVINCIBLE, now=0)
        assert manager.tick(state, 1501) is None
        assert state.flash.active is False
        assert manager.is_invincible(state)

    def test_flash_keeps_running_after_effect_is_gone(self, manager, state):
        manager.activate(state, PowerUpKind.SPEED, now=0)
        manager.deactivate(state)
        assert manager.update_flash(state, 1000) is False
        assert state.flash.active is True
        assert manager.update_flash(state, 1501) is True

    def test_is_invincible(self, manager, state):
        assert not manager.is_invincible(state)
        manager.activate(state, PowerUpKind.SLOW, now=0)
        assert not manager.is_invincible(state)
        manager.activate(state, PowerUpKind.INVINCIBLE, now=0)
        assert manager.is_invincible(state)
