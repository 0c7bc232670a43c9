"""Notification service for queuing messages to users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.notifications.models import Notification
from core.logging import get_logger

if TYPE_CHECKING:
    from uuid import UUID

logger = get_logger(__name__)


class NotificationService:
    """
    Stores notifications for later delivery.

    Callers treat ``create_notification`` as fire-and-forget: nothing is
    returned and delivery happens elsewhere.
    """

    async def create_notification(self, message: str, user_id: UUID | str | None = None) -> None:
        """
        Queue a notification.

        Args:
            message: Text shown to the user.
            user_id: Recipient; None for a broadcast notification.
        """
        notification = await Notification.objects.acreate(user_id=user_id, message=message)
        logger.info(
            "Notification created",
            notification_id=str(notification.id),
            user_id=str(user_id) if user_id else None,
        )

    async def unread_for_user(self, user_id: UUID | str) -> list[Notification]:
        """Return unread notifications for a user, newest first."""
        return [
            notification
            async for notification in Notification.objects.filter(user_id=user_id, is_read=False)
        ]
