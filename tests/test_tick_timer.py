"""
Tests for the schedule-backed tick timer and the clocks.
"""

from unittest.mock import MagicMock

import pytest
import schedule

from conftest import no_spawn
from snake_engine.domain import (
    Direction,
    GameStatus,
    Position,
    PowerUpFood,
    PowerUpKind,
    ScoreFood,
    Snake,
)
from snake_engine.engine import GameSession
from snake_engine.services import SimulatedClock, SystemClock, TickTimer


@pytest.fixture
def scheduler():
    return schedule.Scheduler()


class TestTickTimer:

    def test_arm_schedules_one_job(self, scheduler):
        timer = TickTimer(scheduler)
        timer.arm(150, MagicMock())
        assert timer.active
        assert timer.interval_ms == 150
        assert len(scheduler.jobs) == 1

    def test_rearm_replaces_the_job(self, scheduler):
        timer = TickTimer(scheduler)
        callback = MagicMock()
        timer.arm(150, callback)
        timer.arm(148, callback)
        assert len(scheduler.jobs) == 1
        assert timer.interval_ms == 148

    def test_cancel_is_idempotent(self, scheduler):
        timer = TickTimer(scheduler)
        timer.arm(150, MagicMock())
        assert timer.cancel() is True
        assert timer.cancel() is False
        assert scheduler.jobs == []
        assert not timer.active
        assert timer.idle_seconds is None

    def test_invalid_interval(self, scheduler):
        with pytest.raises(ValueError):
            TickTimer(scheduler).arm(0, MagicMock())

    def test_job_runs_callback(self, scheduler):
        timer = TickTimer(scheduler)
        callback = MagicMock(return_value=None)
        timer.arm(150, callback)
        scheduler.run_all()
        callback.assert_called_once()

    def test_callback_can_rearm_itself(self, scheduler):
        timer = TickTimer(scheduler)

        def tick():
            timer.arm(80, tick)

        timer.arm(150, tick)
        scheduler.run_all()
        assert len(scheduler.jobs) == 1
        assert timer.interval_ms == 80

    def test_idle_seconds_within_interval(self, scheduler):
        timer = TickTimer(scheduler)
        timer.arm(500, MagicMock())
        assert 0 <= timer.idle_seconds <= 0.5


class TestClocks:

    def test_simulated_clock(self):
        clock = SimulatedClock(start=100)
        assert clock() == 100
        assert clock.advance(50) == 150
        with pytest.raises(ValueError):
            clock.advance(-1)

    def test_system_clock_is_monotonic(self):
        clock = SystemClock()
        first = clock()
        assert clock() >= first


class TestSessionOnLiveTimer:
    """A session driving a real schedule.Scheduler through TickTimer."""

    def make_session(self, scheduler, clock):
        session = GameSession(timer=TickTimer(scheduler), clock=clock, spawner=no_spawn())
        session.start()
        return session

    def test_score_change_rearms_from_inside_the_tick(self, scheduler, clock):
        session = self.make_session(scheduler, clock)
        session.state.score = 4
        session.state.foods = [ScoreFood(Position(11, 10), 1)]
        session.handle_direction(Direction.RIGHT)
        assert session.timer.interval_ms == 150

        scheduler.run_all()

        assert session.score == 5
        assert len(scheduler.jobs) == 1
        assert session.timer.interval_ms == 148
        assert scheduler.jobs[0].interval == pytest.approx(0.148)

    def test_effect_change_rearms_once(self, scheduler, clock):
        session = self.make_session(scheduler, clock)
        session.state.foods = [PowerUpFood(Position(11, 10), PowerUpKind.SLOW)]
        session.handle_direction(Direction.RIGHT)

        scheduler.run_all()

        assert session.state.active_effect.kind is PowerUpKind.SLOW
        assert len(scheduler.jobs) == 1
        assert session.timer.interval_ms == pytest.approx(222)

    def test_plain_tick_keeps_the_job(self, scheduler, clock):
        session = self.make_session(scheduler, clock)
        session.handle_direction(Direction.RIGHT)
        job = scheduler.jobs[0]

        scheduler.run_all()

        assert session.state.tick_count == 1
        assert scheduler.jobs == [job]

    def test_game_over_leaves_no_job(self, scheduler, clock):
        session = self.make_session(scheduler, clock)
        session.state.snake = Snake([(19, 10), (18, 10), (17, 10)], Direction.RIGHT)
        session.handle_direction(Direction.RIGHT)

        scheduler.run_all()

        assert session.status is GameStatus.OVER
        assert scheduler.jobs == []
        assert not session.timer.active
