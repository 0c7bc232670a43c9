"""Notification service package."""

from services.notifications.service import NotificationService

__all__ = ["NotificationService"]
