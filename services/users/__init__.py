"""User service package."""

from services.users.service import UserService
from services.users.types import (
    NewUser,
    PasswordUpdate,
    ProfileUpdate,
    UserCreated,
    UserProfile,
    UserRemoved,
    UserUpdated,
)

__all__ = [
    "NewUser",
    "PasswordUpdate",
    "ProfileUpdate",
    "UserCreated",
    "UserProfile",
    "UserRemoved",
    "UserService",
    "UserUpdated",
]
