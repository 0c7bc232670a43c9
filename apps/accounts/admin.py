"""Admin configuration for accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
# UserAdmin is generic in django-stubs but not subscriptable at runtime
class UserAdmin(BaseUserAdmin):  # type: ignore[type-arg]
    """Admin configuration for custom User model."""

    list_display = ("username", "email", "cart_size", "is_staff", "is_active")
    list_filter = ("is_staff", "is_active", "date_joined")
    search_fields = ("username", "email")
    ordering = ("-date_joined",)

    @admin.display(description="Cart")
    def cart_size(self, obj: User) -> int:
        """Return the number of product ids in the cart."""
        return len(obj.cart or [])


UserAdmin.fieldsets = (
    *tuple(BaseUserAdmin.fieldsets or ()),
    ("Cart", {"fields": ("cart",)}),
)
