"""Admin configuration for catalog app."""

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin configuration for Product model."""

    list_display = ("name", "category", "price", "quantity", "user", "created_at")
    list_filter = ("category",)
    search_fields = ("name", "description")
    readonly_fields = ("id", "created_at", "updated_at")
    raw_id_fields = ("user",)
