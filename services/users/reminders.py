"""Cart reminder job run by the scheduler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from asgiref.sync import async_to_sync
from django.db import close_old_connections

from apps.accounts.models import User
from core.logging import get_logger, job_context

if TYPE_CHECKING:
    from uuid import UUID

    from services.notifications.service import NotificationService

logger = get_logger(__name__)

REMINDER_MESSAGE = (
    "Items are still in your cart! Ready to buy? "
    "Head to checkout whenever you're set. Happy shopping!"
)


def reminder_job_key(user_id: UUID | str) -> str:
    """Return the registry key of a user's cart reminder."""
    return f"cart-reminder:{user_id}"


class CartReminder:
    """
    Sends the cart reminder for one user.

    The cart is checked on every firing; an empty cart (or a deleted user)
    skips the notification but leaves the job registered.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self._notifications = notification_service

    async def run(self, user_id: UUID | str) -> bool:
        """
        Send the reminder if the user's cart still holds products.

        Args:
            user_id: Recipient.

        Returns:
            True if a notification was created.
        """
        user = await User.objects.filter(pk=user_id).afirst()
        if user is None or not user.has_items_in_cart:
            logger.info("Cart reminder skipped", user_id=str(user_id), user_exists=user is not None)
            return False

        logger.info("Sending cart reminder", user_id=str(user_id), cart_size=len(user.cart))
        await self._notifications.create_notification(REMINDER_MESSAGE, user_id=user.pk)
        return True

    def __call__(self, user_id: UUID | str) -> None:
        """Entry point for scheduler worker threads."""
        close_old_connections()
        try:
            with job_context(reminder_job_key(user_id), user_id=str(user_id)):
                async_to_sync(self.run)(user_id)
        finally:
            close_old_connections()
