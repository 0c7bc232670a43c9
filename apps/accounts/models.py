"""User models for the accounts application."""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model extending Django's AbstractUser.

    Carries the shopping cart as an ordered list of product ids. The cart is
    a plain sequence: the same product id may appear more than once.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    cart: models.JSONField[list[str] | None] = models.JSONField(
        null=True,
        blank=True,
        default=None,
        help_text="Ordered product ids in the user's cart",
    )

    class Meta:
        """Meta options for User model."""

        db_table = "users"
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.username

    @property
    def has_items_in_cart(self) -> bool:
        """Check if the cart holds at least one product id."""
        return bool(self.cart)
