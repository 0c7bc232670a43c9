"""Construction of a UserService wired to the process-wide collaborators."""

from __future__ import annotations

from core.config import get_settings
from services.catalog.service import ProductService
from services.notifications.service import NotificationService
from services.scheduling.registry import get_cron_registry
from services.scheduling.types import CronSpec
from services.users.service import UserService


def reminder_spec_from_settings() -> CronSpec:
    """Build the daily reminder time from ``SCHEDULER_*`` settings."""
    config = get_settings().scheduler
    return CronSpec(
        hour=config.reminder_hour,
        minute=config.reminder_minute,
        second=config.reminder_second,
    )


def build_user_service() -> UserService:
    """Return a UserService using the shared cron registry."""
    return UserService(
        product_service=ProductService(),
        registry=get_cron_registry(),
        notification_service=NotificationService(),
        reminder_spec=reminder_spec_from_settings(),
    )
