"""
Periodic tick scheduling built on the `schedule` library.

The scheduler holds at most one job. Every (re)start cancels the previous
job before adding the new one, so two timers never run at once and a
running job can safely re-arm the scheduler from inside its own callback.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

LOOP_SLEEP_SECONDS = 0.005


class TickScheduler:
    """Invokes one callback every `interval_ms` milliseconds while active."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self._scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._interval_ms: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self._job is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    def start(self, interval_ms: int, callback: Callable[[], object]) -> None:
        """Cancel any pending job and schedule `callback` at the new interval."""
        self.stop()

        def job():
            callback()

        self._job = self._scheduler.every(interval_ms / 1000.0).seconds.do(job)
        self._interval_ms = interval_ms
        logger.debug("Tick job armed at %s ms", interval_ms)

    def stop(self) -> None:
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            self._job = None
            logger.debug("Tick job cancelled")
        self._interval_ms = None

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def run_until(
        self,
        done: Callable[[], bool],
        between_checks: Optional[Callable[[], object]] = None,
        sleep_seconds: float = LOOP_SLEEP_SECONDS,
    ) -> None:
        """
        Drive the scheduler from the calling thread until `done()` is true.

        Args:
            done: checked before every loop iteration
            between_checks: optional hook run before each run_pending(),
                e.g. to feed input into the engine
            sleep_seconds: idle time between iterations
        """
        while not done():
            if between_checks is not None:
                between_checks()
            self._scheduler.run_pending()
            time.sleep(sleep_seconds)
