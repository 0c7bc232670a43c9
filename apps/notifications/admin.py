"""Admin configuration for notifications app."""

from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin configuration for Notification model."""

    list_display = ("__str__", "user", "is_read", "created_at")
    list_filter = ("is_read", "created_at")
    search_fields = ("message", "user__username")
    readonly_fields = ("id", "created_at")
    raw_id_fields = ("user",)
