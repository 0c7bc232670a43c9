"""Scheduling package."""

from services.scheduling.registry import CronRegistry, ScheduledJob, get_cron_registry
from services.scheduling.types import CronSpec, JobHandle, JobRegistry

__all__ = [
    "CronRegistry",
    "CronSpec",
    "JobHandle",
    "JobRegistry",
    "ScheduledJob",
    "get_cron_registry",
]
