"""Tests for Django models."""

from decimal import Decimal

import pytest

from apps.accounts.models import User
from apps.catalog.models import Product
from apps.notifications.models import Notification


@pytest.mark.django_db
class TestUserModel:
    """Tests for the User model."""

    def test_user_str_returns_username(self) -> None:
        """User __str__ should return the username."""
        user = User(username="testuser", email="test@example.com")

        assert str(user) == "testuser"

    def test_cart_defaults_to_none(self) -> None:
        """A new user has no cart."""
        user = User.objects.create_user(username="alice", email="alice@example.com", password="x")

        assert user.cart is None
        assert user.has_items_in_cart is False

    def test_cart_keeps_order_and_duplicates(self) -> None:
        """The cart round-trips as an ordered list with duplicates."""
        user = User.objects.create_user(username="alice", email="alice@example.com", password="x")
        user.cart = ["b", "a", "b"]
        user.save()

        user.refresh_from_db()
        assert user.cart == ["b", "a", "b"]
        assert user.has_items_in_cart is True

    def test_password_is_hashed(self) -> None:
        """Passwords are stored hashed."""
        user = User.objects.create_user(username="alice", email="alice@example.com", password="secret123")

        assert user.password != "secret123"
        assert user.check_password("secret123")


@pytest.mark.django_db
class TestProductModel:
    """Tests for the Product model."""

    def test_product_str_and_stock(self) -> None:
        """Product __str__ returns the name; in_stock follows quantity."""
        product = Product.objects.create(name="Lamp", price=Decimal("19.99"), category="home")

        assert str(product) == "Lamp"
        assert product.in_stock is False

        product.quantity = 3
        assert product.in_stock is True

    def test_products_reverse_relation(self) -> None:
        """Products owned by a user are reachable through user.products."""
        user = User.objects.create_user(username="seller", email="seller@example.com", password="x")
        Product.objects.create(name="Lamp", price=Decimal("1"), category="home", user=user)

        assert user.products.count() == 1

    def test_deleting_owner_keeps_product(self) -> None:
        """Removing the owner leaves the product without an owner."""
        user = User.objects.create_user(username="seller", email="seller@example.com", password="x")
        product = Product.objects.create(name="Lamp", price=Decimal("1"), category="home", user=user)

        user.delete()
        product.refresh_from_db()

        assert product.user is None


@pytest.mark.django_db
class TestNotificationModel:
    """Tests for the Notification model."""

    def test_str_truncates_long_messages(self) -> None:
        """Long messages are shortened in __str__."""
        notification = Notification.objects.create(message="A" * 100)

        assert str(notification) == "A" * 50 + "..."
        assert notification.is_read is False
