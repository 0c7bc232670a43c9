"""APScheduler-backed job registry."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

from core.config import get_settings
from core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from apscheduler.job import Job
    from apscheduler.schedulers.base import BaseScheduler

    from services.scheduling.types import CronSpec

logger = get_logger(__name__)


class ScheduledJob:
    """JobHandle over an APScheduler job; stop/start map to pause/resume."""

    def __init__(self, job: Job) -> None:
        self._job = job

    @property
    def key(self) -> str:
        return str(self._job.id)

    @property
    def is_running(self) -> bool:
        return self._job.next_run_time is not None

    def start(self) -> None:
        self._job = self._job.resume()

    def stop(self) -> None:
        self._job = self._job.pause()


class CronRegistry:
    """
    Registry of named cron jobs backed by an APScheduler scheduler.

    Jobs are added paused so the caller decides when they start firing,
    mirroring the register-then-start flow of the services.

    Example:
        >>> registry = CronRegistry(BackgroundScheduler())
        >>> job = registry.add_job("cart-reminder:42", send, CronSpec(hour=11))
        >>> job.start()
    """

    def __init__(self, scheduler: BaseScheduler, timezone: str | None = None) -> None:
        """
        Initialize the registry.

        Args:
            scheduler: Scheduler that stores and runs the jobs.
            timezone: Timezone for cron triggers (scheduler default if None).
        """
        self._scheduler = scheduler
        self._timezone = timezone

    @property
    def is_running(self) -> bool:
        """Check if the underlying scheduler is running."""
        return bool(self._scheduler.running)

    def add_job(
        self,
        key: str,
        func: Callable[..., Any],
        spec: CronSpec,
        args: Sequence[Any] = (),
    ) -> ScheduledJob:
        """
        Register a job under ``key``, replacing any existing one.

        Args:
            key: Unique job key.
            func: Callable run on every trigger.
            spec: Daily time at which the job fires.
            args: Positional arguments passed to ``func``.

        Returns:
            Handle of the (paused) job.
        """
        # Pending jobs of a stopped scheduler are not deduplicated by id
        if self._scheduler.get_job(key) is not None:
            self._scheduler.remove_job(key)
            logger.info("Replacing existing cron job", key=key)

        job = self._scheduler.add_job(
            func,
            trigger=spec.to_trigger(self._timezone),
            args=list(args),
            id=key,
            name=key,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
            next_run_time=None,
        )
        logger.debug("Cron job registered", key=key, cron=str(spec))
        return ScheduledJob(job)

    def get_job(self, key: str) -> ScheduledJob | None:
        """Return the job registered under ``key``, if any."""
        job = self._scheduler.get_job(key)
        if job is None:
            return None
        return ScheduledJob(job)

    def delete_job(self, key: str) -> None:
        """
        Remove the job registered under ``key``.

        Raises:
            KeyError: If no job is registered under ``key``.
        """
        try:
            self._scheduler.remove_job(key)
        except JobLookupError as e:
            raise KeyError(key) from e
        logger.debug("Cron job removed", key=key)

    def shutdown(self) -> None:
        """Shut the scheduler down without waiting for running jobs."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)


@lru_cache
def get_cron_registry() -> CronRegistry:
    """
    Get the process-wide cron registry.

    The background scheduler is started on first use unless
    ``SCHEDULER_AUTOSTART`` is disabled.

    Returns:
        Shared CronRegistry instance.
    """
    config = get_settings().scheduler
    scheduler = BackgroundScheduler(timezone=config.timezone)
    if config.autostart:
        scheduler.start()
        logger.info("Background scheduler started", timezone=config.timezone)
    return CronRegistry(scheduler, timezone=config.timezone)
