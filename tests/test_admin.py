"""Tests for Django admin configurations."""

from __future__ import annotations

import pytest
from django.contrib.admin.sites import AdminSite

from apps.accounts.admin import UserAdmin
from apps.accounts.models import User


@pytest.mark.django_db
class TestUserAdmin:
    """Tests for UserAdmin."""

    def test_cart_size(self) -> None:
        """cart_size counts product ids, treating a missing cart as empty."""
        admin = UserAdmin(User, AdminSite())
        user = User.objects.create_user(username="alice", email="alice@example.com", password="x")

        assert admin.cart_size(user) == 0

        user.cart = ["p1", "p1", "p2"]
        assert admin.cart_size(user) == 3

    def test_cart_fieldset_present(self) -> None:
        """The cart is editable from the user change page."""
        names = [name for name, _ in UserAdmin.fieldsets]

        assert "Cart" in names
