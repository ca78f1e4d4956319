"""Periodic trigger for bookmark syncs."""

import asyncio
from typing import Any, Awaitable, Callable

import structlog

from linkding_sync.settings.models import SyncSettings

logger = structlog.get_logger(__name__)

Job = Callable[[], Awaitable[Any]]


class PeriodicSync:
    """Runs a job every ``interval_minutes`` on the running event loop.

    The first run happens one interval after ``start``. Each run is spawned as
    its own task, so stopping or rescheduling the timer never cancels a sync
    that is already in flight.
    """

    def __init__(self, job: Job, seconds_per_minute: float = 60.0):
        self._job = job
        self._seconds_per_minute = seconds_per_minute
        self._timer: asyncio.Task | None = None
        self._runs: set[asyncio.Task] = set()
        self._interval_minutes = 0

    @property
    def interval_minutes(self) -> int:
        return self._interval_minutes

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self, interval_minutes: int) -> None:
        self.stop()
        self._interval_minutes = interval_minutes
        if interval_minutes <= 0:
            logger.info("periodic_sync_disabled")
            return
        interval_seconds = interval_minutes * self._seconds_per_minute
        self._timer = asyncio.get_running_loop().create_task(
            self._tick(interval_seconds)
        )
        logger.info("periodic_sync_scheduled", interval_minutes=interval_minutes)

    def reschedule(self, interval_minutes: int) -> None:
        if self.running and interval_minutes == self._interval_minutes:
            return
        self.start(interval_minutes)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def on_settings_changed(self, key: str, settings: SyncSettings) -> None:
        if key == "updateIntervalMinutes":
            self.reschedule(settings.update_interval_minutes)

    async def wait_idle(self) -> None:
        """Wait for syncs started by the timer to finish."""
        if self._runs:
            await asyncio.gather(*self._runs, return_exceptions=True)

    async def _tick(self, interval_seconds: float) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            run = asyncio.get_running_loop().create_task(self._run_job())
            self._runs.add(run)
            run.add_done_callback(self._runs.discard)

    async def _run_job(self) -> None:
        try:
            await self._job()
        except Exception as e:
            logger.exception("scheduled_sync_failed", error=str(e))
