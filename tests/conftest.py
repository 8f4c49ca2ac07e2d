"""
Shared fixtures for the snake engine tests.
"""

import random
from unittest.mock import MagicMock

import pytest

from snake_engine.data_access import InMemoryHighScoreStore
from snake_engine.domain import Direction, GameState, GameStatus, Grid, Snake
from snake_engine.engine import EffectManager, GameSession, Spawner, TickEngine
from snake_engine.services import RecordingAudioSink, SimulatedClock


class ScriptedRandom:
    """
    Stand-in for random.Random that replays scripted draws.

    floats feed random(), picks are indexes fed to choice(), cells feed randrange().
    """

    def __init__(self, floats=(), picks=(), cells=()):
        self.floats = list(floats)
        self.picks = list(picks)
        self.cells = list(cells)

    def random(self):
        return self.floats.pop(0)

    def choice(self, seq):
        return seq[self.picks.pop(0)]

    def randrange(self, n):
        value = self.cells.pop(0)
        assert 0 <= value < n
        return value


def no_spawn(grid=None):
    """A spawner that never finds a free cell, leaving foods untouched."""
    return Spawner(grid or Grid(), rng=random.Random(0), max_attempts=0)


def running_state(snake, direction=Direction.RIGHT, foods=()):
    state = GameState()
    state.snake = Snake(snake, direction)
    state.foods = list(foods)
    state.status = GameStatus.RUNNING
    return state


@pytest.fixture
def clock():
    return SimulatedClock(start=1_000)


@pytest.fixture
def engine(clock):
    return TickEngine(no_spawn(), EffectManager(), clock)


@pytest.fixture
def timer():
    timer = MagicMock()
    timer.interval_ms = None
    return timer


@pytest.fixture
def audio():
    return RecordingAudioSink()


@pytest.fixture
def store():
    return InMemoryHighScoreStore()


@pytest.fixture
def make_session(clock, timer, audio, store):
    def _make(**overrides):
        options = dict(
            high_score_store=store,
            audio=audio,
            timer=timer,
            clock=clock,
            spawner=no_spawn(),
        )
        options.update(overrides)
        return GameSession(**options)

    return _make
