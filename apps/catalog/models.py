"""Models for the catalog application."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """
    A product listed in the storefront catalog.

    Images, attributes, specifications, ratings and reviews are stored as
    JSON documents; only the scalar fields are queried.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    category = models.CharField(max_length=100, db_index=True)
    quantity = models.PositiveIntegerField(default=0)
    images = models.JSONField(
        null=True,
        blank=True,
        help_text="List of image URLs",
    )
    attributes = models.JSONField(
        null=True,
        blank=True,
        help_text="List of {name, value} attribute objects",
    )
    specifications = models.JSONField(
        null=True,
        blank=True,
        help_text="Free-form specification object",
    )
    ratings = models.JSONField(
        null=True,
        blank=True,
        help_text="Rating summary, e.g. {average, count}",
    )
    reviews = models.JSONField(
        null=True,
        blank=True,
        help_text="List of review objects",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Meta options for Product model."""

        db_table = "products"
        ordering = ["-created_at"]
        verbose_name = "Product"
        verbose_name_plural = "Products"

    def __str__(self) -> str:
        """Return string representation."""
        return self.name

    @property
    def in_stock(self) -> bool:
        """Check if at least one unit is available."""
        return self.quantity > 0
