"""Types for the user service."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime
    from uuid import UUID

    from apps.accounts.models import User


@dataclass(frozen=True, slots=True)
class NewUser:
    """
    Registration data.

    Attributes:
        username: Unique login name.
        email: Unique email address.
        password: Raw password; hashed before it is stored.
        first_name: Optional given name.
        last_name: Optional family name.
    """

    username: str
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True, slots=True)
class UserProfile:
    """A user as exposed outside the service: every field except the password."""

    id: UUID
    username: str
    email: str
    first_name: str
    last_name: str
    cart: list[str] | None
    is_active: bool
    date_joined: datetime

    @classmethod
    def from_user(cls, user: User) -> UserProfile:
        """Build a profile from a user record."""
        return cls(
            id=user.pk,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            cart=list(user.cart) if user.cart is not None else None,
            is_active=user.is_active,
            date_joined=user.date_joined,
        )


@dataclass(frozen=True, slots=True)
class ProfileUpdate:
    """
    Profile fields to merge onto a user.

    ``None`` means "leave unchanged"; every other value overwrites the
    stored one.
    """

    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the provided fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True, slots=True)
class PasswordUpdate:
    """A new raw password for a user."""

    password: str


type UserPatch = ProfileUpdate | PasswordUpdate


@dataclass(frozen=True, slots=True)
class UserCreated:
    """Result of a successful registration."""

    status: int
    message: str
    user: User


@dataclass(frozen=True, slots=True)
class UserUpdated:
    """Result of a successful update."""

    message: str
    user: UserProfile


@dataclass(frozen=True, slots=True)
class UserRemoved:
    """Result of a successful deletion."""

    status: bool
    message: str
