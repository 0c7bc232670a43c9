"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests, including an
in-memory stand-in for the scheduling port.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import pytest
from django.test import Client

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from apps.accounts.models import User
    from apps.catalog.models import Product
    from services.scheduling.types import CronSpec
    from services.users.service import UserService


@dataclass
class FakeJob:
    """Job handle recorded by InMemoryJobRegistry."""

    key: str
    func: Callable[..., Any]
    spec: CronSpec
    args: tuple[Any, ...]
    is_running: bool = False

    def start(self) -> None:
        self.is_running = True

    def stop(self) -> None:
        self.is_running = False


@dataclass
class InMemoryJobRegistry:
    """Scheduling port that only records jobs; nothing ever fires by itself."""

    jobs: dict[str, FakeJob] = field(default_factory=dict)

    def add_job(
        self,
        key: str,
        func: Callable[..., Any],
        spec: CronSpec,
        args: Sequence[Any] = (),
    ) -> FakeJob:
        job = FakeJob(key=key, func=func, spec=spec, args=tuple(args))
        self.jobs[key] = job
        return job

    def get_job(self, key: str) -> FakeJob | None:
        return self.jobs.get(key)

    def delete_job(self, key: str) -> None:
        del self.jobs[key]


@pytest.fixture()
def test_client() -> Client:
    """Return a Django test client."""
    return Client()


@pytest.fixture()
def registry() -> InMemoryJobRegistry:
    """Return an empty in-memory job registry."""
    return InMemoryJobRegistry()


@pytest.fixture()
def user_service(registry: InMemoryJobRegistry) -> UserService:
    """Return a UserService backed by the database and the fake registry."""
    from services.catalog.service import ProductService
    from services.notifications.service import NotificationService
    from services.users.service import UserService

    return UserService(
        product_service=ProductService(),
        registry=registry,
        notification_service=NotificationService(),
    )


@pytest.fixture()
def user(db: None) -> User:
    """Create a test user with an empty (unset) cart."""
    from apps.accounts.models import User

    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture()
def make_product(db: None) -> Callable[..., Product]:
    """Return a factory creating catalog products."""
    from apps.catalog.models import Product

    def _make(name: str = "Desk Lamp", **kwargs: Any) -> Product:
        defaults: dict[str, Any] = {
            "price": Decimal("19.99"),
            "category": "home",
            "quantity": 5,
        }
        defaults.update(kwargs)
        return Product.objects.create(name=name, **defaults)

    return _make
