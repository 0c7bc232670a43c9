"""Tests for the cart reminder job and the notification service."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from asgiref.sync import async_to_sync

from apps.notifications.models import Notification
from services.notifications.service import NotificationService
from services.users.reminders import REMINDER_MESSAGE, CartReminder, reminder_job_key

if TYPE_CHECKING:
    from apps.accounts.models import User
    from services.users.service import UserService
    from tests.conftest import InMemoryJobRegistry


class TestReminderJobKey:
    """Tests for reminder_job_key."""

    def test_key_is_derived_from_user_id(self) -> None:
        """Keys embed the user id so each user has at most one reminder."""
        user_id = uuid.UUID("12345678-1234-5678-1234-567812345678")

        assert reminder_job_key(user_id) == "cart-reminder:12345678-1234-5678-1234-567812345678"


@pytest.mark.django_db
class TestCartReminder:
    """Tests for CartReminder.run."""

    def test_sends_when_cart_has_items(self, user: User) -> None:
        """A non-empty cart produces a notification for the user."""
        user.cart = ["p1"]
        user.save()

        sent = async_to_sync(CartReminder(NotificationService()).run)(user.pk)

        assert sent is True
        notification = Notification.objects.get()
        assert notification.user_id == user.pk
        assert notification.message == REMINDER_MESSAGE

    def test_skips_when_cart_emptied(self, user: User) -> None:
        """A cart emptied after scheduling skips the notification."""
        user.cart = []
        user.save()

        sent = async_to_sync(CartReminder(NotificationService()).run)(user.pk)

        assert sent is False
        assert Notification.objects.count() == 0

    def test_skips_deleted_user(self) -> None:
        """A user deleted after scheduling skips the notification."""
        notifications = MagicMock()
        notifications.create_notification = AsyncMock()

        sent = async_to_sync(CartReminder(notifications).run)(uuid.uuid4())

        assert sent is False
        notifications.create_notification.assert_not_awaited()

    def test_registered_job_fires_reminder(
        self,
        user_service: UserService,
        registry: InMemoryJobRegistry,
        user: User,
    ) -> None:
        """The job registered by notify_user sends the reminder when run."""
        user.cart = ["p1"]
        user.save()
        async_to_sync(user_service.notify_user)(user.pk, True)
        job = registry.get_job(reminder_job_key(user.pk))

        async_to_sync(job.func.run)(*job.args)

        assert Notification.objects.filter(user=user).count() == 1


class TestCartReminderCall:
    """Tests for the scheduler entry point."""

    def test_call_runs_and_recycles_connections(self) -> None:
        """Worker-thread calls close stale connections around the run."""
        reminder = CartReminder(MagicMock())

        with (
            patch("services.users.reminders.close_old_connections") as close,
            patch.object(CartReminder, "run", new=AsyncMock(return_value=True)) as run,
        ):
            reminder("user-1")

        run.assert_awaited_once_with("user-1")
        assert close.call_count == 2


@pytest.mark.django_db
class TestNotificationService:
    """Tests for NotificationService."""

    def test_create_notification_without_user(self) -> None:
        """Notifications may be broadcast (no recipient)."""
        async_to_sync(NotificationService().create_notification)("Sale starts now")

        notification = Notification.objects.get()
        assert notification.user is None
        assert notification.message == "Sale starts now"

    def test_unread_for_user(self, user: User) -> None:
        """Only the user's unread notifications are returned."""
        Notification.objects.create(user=user, message="one")
        Notification.objects.create(user=user, message="read", is_read=True)
        Notification.objects.create(message="broadcast")

        unread = async_to_sync(NotificationService().unread_for_user)(user.pk)

        assert [n.message for n in unread] == ["one"]
