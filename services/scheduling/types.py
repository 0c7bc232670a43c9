"""Types for the scheduling port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from apscheduler.triggers.cron import CronTrigger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


@dataclass(frozen=True, slots=True)
class CronSpec:
    """
    Time of day at which a daily job fires.

    Attributes:
        hour: Hour of the day (0-23).
        minute: Minute of the hour.
        second: Second of the minute.
    """

    hour: int = 11
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        """Return the spec in six-field cron notation."""
        return f"{self.second} {self.minute} {self.hour} * * *"

    def to_trigger(self, timezone: str | None = None) -> CronTrigger:
        """
        Build an APScheduler trigger firing every day at this time.

        Args:
            timezone: Timezone name; the scheduler's timezone when omitted.

        Returns:
            A CronTrigger for the configured time.
        """
        return CronTrigger(
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            timezone=timezone,
        )


class JobHandle(Protocol):
    """A registered job that can be paused and resumed."""

    @property
    def key(self) -> str:
        """Registry key of the job."""
        ...

    @property
    def is_running(self) -> bool:
        """True while the job fires on its trigger."""
        ...

    def start(self) -> None:
        """Resume firing on the trigger."""
        ...

    def stop(self) -> None:
        """Stop firing until started again."""
        ...


class JobRegistry(Protocol):
    """
    Scheduling port used by services.

    ``add_job`` is an upsert: registering a key that already exists
    replaces the previous job instead of failing.
    """

    def add_job(
        self,
        key: str,
        func: Callable[..., Any],
        spec: CronSpec,
        args: Sequence[Any] = (),
    ) -> JobHandle:
        """Register (or replace) a paused job under ``key``."""
        ...

    def get_job(self, key: str) -> JobHandle | None:
        """Return the job registered under ``key``, if any."""
        ...

    def delete_job(self, key: str) -> None:
        """Remove the job registered under ``key``."""
        ...
