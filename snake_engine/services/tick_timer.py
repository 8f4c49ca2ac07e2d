"""
Repeating tick timer backed by the `schedule` library.

The timer owns at most one job. Re-arming always cancels the previous job
before scheduling the new one, so two tick loops can never run side by
side. The owner drives it from a single-threaded loop via run_pending().
"""

import logging
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickTimer:
    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self.scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self.interval_ms: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._job is not None

    def arm(self, interval_ms: float, callback: Callable[[], None]) -> None:
        """Cancel any running job and schedule `callback` every `interval_ms`."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.cancel()
        self._job = self.scheduler.every(interval_ms / 1000).seconds.do(callback)
        self.interval_ms = interval_ms
        logger.debug(f"Tick timer armed at {interval_ms}ms")

    def cancel(self) -> bool:
        """Cancel the running job. Returns False if nothing was armed."""
        if self._job is None:
            return False
        self.scheduler.cancel_job(self._job)
        self._job = None
        self.interval_ms = None
        logger.debug("Tick timer cancelled")
        return True

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    @property
    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next tick is due, or None when not armed."""
        if self._job is None:
            return None
        return self.scheduler.idle_seconds
