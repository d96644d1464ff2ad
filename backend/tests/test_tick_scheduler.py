"""
Tests for services/tick_scheduler.py.
"""

import sys
import os
import random
from unittest.mock import Mock

import schedule

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import EngineConfig
from database import MemoryHighScoreStore
from domain import RIGHT, Snake
from engine import GameEngine
from services.tick_scheduler import TickScheduler


class TestTickScheduler:

    def test_start_adds_single_job(self):
        inner = schedule.Scheduler()
        ticker = TickScheduler(inner)

        ticker.start(110, Mock())

        assert ticker.is_active
        assert ticker.interval_ms == 110
        assert len(inner.jobs) == 1
        assert inner.jobs[0].unit == "seconds"
        assert inner.jobs[0].interval == 110 / 1000.0

    def test_restart_replaces_job(self):
        inner = schedule.Scheduler()
        ticker = TickScheduler(inner)

        ticker.start(110, Mock())
        ticker.start(99, Mock())

        assert len(inner.jobs) == 1
        assert ticker.interval_ms == 99
        assert inner.jobs[0].unit == "seconds"
        assert inner.jobs[0].interval == 99 / 1000.0

    def test_stop_is_idempotent(self):
        inner = schedule.Scheduler()
        ticker = TickScheduler(inner)
        ticker.start(110, Mock())

        ticker.stop()
        ticker.stop()

        assert not ticker.is_active
        assert ticker.interval_ms is None
        assert inner.jobs == []

    def test_job_invokes_callback(self):
        inner = schedule.Scheduler()
        ticker = TickScheduler(inner)
        callback = Mock()
        ticker.start(110, callback)

        inner.run_all()

        callback.assert_called_once_with()

    def test_callback_can_rearm(self):
        inner = schedule.Scheduler()
        ticker = TickScheduler(inner)

        def speed_up():
            ticker.start(50, speed_up)

        ticker.start(110, speed_up)
        inner.run_all()

        assert len(inner.jobs) == 1
        assert ticker.interval_ms == 50

    def test_run_until(self):
        ticker = TickScheduler(schedule.Scheduler())
        checks = iter([False, False, True])
        hook = Mock()

        ticker.run_until(lambda: next(checks), between_checks=hook, sleep_seconds=0)

        assert hook.call_count == 2


class TestEngineScheduling:
    """The engine keeps exactly one tick job while running."""

    def _engine(self, inner):
        return GameEngine(
            config=EngineConfig(grid_width=10, grid_height=10),
            scheduler=TickScheduler(inner),
            high_score_store=MemoryHighScoreStore(),
            rng=random.Random(5),
        )

    def test_start_pause_reset(self):
        inner = schedule.Scheduler()
        engine = self._engine(inner)

        engine.start()
        assert len(inner.jobs) == 1

        engine.pause()
        assert inner.jobs == []

        engine.start()
        engine.reset()
        assert inner.jobs == []

    def test_scheduled_tick_moves_snake(self):
        inner = schedule.Scheduler()
        engine = self._engine(inner)
        engine.start()
        engine.food = (0, 0)

        inner.run_all()

        assert engine.snake.head == (6, 5)
        assert len(inner.jobs) == 1

    def test_speed_up_rearms_once(self):
        inner = schedule.Scheduler()
        engine = self._engine(inner)
        engine.start()
        engine.score = 3
        engine.food = (6, 5)

        inner.run_all()

        assert engine.speed_ms == 99
        assert len(inner.jobs) == 1
        assert inner.jobs[0].unit == "seconds"
        assert inner.jobs[0].interval == 99 / 1000.0

    def test_game_over_cancels_job(self):
        inner = schedule.Scheduler()
        engine = self._engine(inner)
        engine.start()
        engine.snake = Snake([(9, 5)])
        engine.direction = RIGHT

        inner.run_all()

        assert engine.game_over_reason == "wall"
        assert inner.jobs == []
