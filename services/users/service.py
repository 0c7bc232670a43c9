"""User service: account lifecycle, cart and cart reminders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError

from apps.accounts.models import User
from core.exceptions import ConflictError, NotFoundError
from core.logging import get_logger
from services.scheduling.types import CronSpec
from services.types import CART_EMPTY, ServiceMessage
from services.users.reminders import CartReminder, reminder_job_key
from services.users.types import (
    PasswordUpdate,
    ProfileUpdate,
    UserCreated,
    UserProfile,
    UserRemoved,
    UserUpdated,
)

if TYPE_CHECKING:
    from typing import Any
    from uuid import UUID

    from apps.catalog.models import Product
    from services.catalog.service import ProductService
    from services.notifications.service import NotificationService
    from services.scheduling.types import JobRegistry
    from services.users.types import NewUser, UserPatch

logger = get_logger(__name__)

USER_NOT_FOUND = (
    "Whoopsie! No magic user here! Stir up some registration potion "
    "and join the fun. See you in the enchanted user realm!"
)
REMINDER_ENABLED = "User will be notified when there's an outstanding product(s) in cart"
REMINDER_DISABLED = "User notification stopped"


class UserService:
    """
    Orchestrates users, their carts and cart reminders.

    Collaborators are injected so tests can replace the product lookup,
    the scheduler and the notification sender.
    """

    def __init__(
        self,
        product_service: ProductService,
        registry: JobRegistry,
        notification_service: NotificationService,
        reminder_spec: CronSpec | None = None,
    ) -> None:
        """
        Initialize the user service.

        Args:
            product_service: Resolves product ids in carts.
            registry: Scheduling port holding reminder jobs.
            notification_service: Receives reminder notifications.
            reminder_spec: Daily reminder time (11:00:00 by default).
        """
        self._products = product_service
        self._registry = registry
        self._reminder = CartReminder(notification_service)
        self._reminder_spec = reminder_spec or CronSpec()

    # Accounts

    async def create(self, data: NewUser) -> UserCreated:
        """
        Register a new user.

        Raises:
            ConflictError: If the email or username is already taken.
        """
        if await self.find_user_by_email(data.email) is not None:
            raise ConflictError("Email already exists")
        if await User.objects.filter(username=data.username).aexists():
            raise ConflictError("Username already exists")

        user = User(
            username=data.username,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        user.set_password(data.password)
        await user.asave()

        logger.info("User created", user_id=str(user.pk), username=user.username)
        return UserCreated(status=200, message="User was created successfully", user=user)

    async def find_all(self) -> list[UserProfile]:
        """Return every user without the password."""
        return [UserProfile.from_user(user) async for user in User.objects.order_by("date_joined")]

    async def find_one(self, username: str) -> User:
        """
        Return the full user record for ``username``.

        Raises:
            NotFoundError: If no user has this username.
        """
        user = await User.objects.filter(username=username).afirst()
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    async def get_user_by_id(self, user_id: UUID | str) -> User:
        """
        Return the full user record for ``user_id``.

        Raises:
            NotFoundError: If the id is unknown or malformed.
        """
        try:
            return await User.objects.aget(pk=user_id)
        except (User.DoesNotExist, ValidationError) as e:
            raise NotFoundError(USER_NOT_FOUND) from e

    async def get_current_user(self, username: str) -> UserProfile:
        """Like ``find_one`` but without the password."""
        return UserProfile.from_user(await self.find_one(username))

    async def update(self, username: str, patch: UserPatch) -> UserUpdated:
        """
        Apply a password or profile update.

        A ``PasswordUpdate`` only replaces the password. A ``ProfileUpdate``
        overwrites every field it provides.

        Raises:
            NotFoundError: If the user does not exist.
            ConflictError: If the new email or username belongs to another user.
        """
        user = await self.find_one(username)

        match patch:
            case PasswordUpdate(password=password):
                user.set_password(password)
                update_fields = ["password"]
            case ProfileUpdate():
                changes = patch.changes()
                await self._ensure_available(user, changes)
                for name, value in changes.items():
                    setattr(user, name, value)
                update_fields = list(changes)
            case _:
                raise TypeError(f"Unsupported user update: {type(patch).__name__}")

        if update_fields:
            await user.asave(update_fields=update_fields)

        logger.info("User updated", user_id=str(user.pk), fields=update_fields)
        return UserUpdated(message="User was updated successfully", user=UserProfile.from_user(user))

    async def remove(self, username: str) -> UserRemoved:
        """
        Delete a user and drop any reminder scheduled for them.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.find_one(username)
        user_id = user.pk
        await user.adelete()
        self._cancel_reminder(user_id)

        logger.info("User deleted", user_id=str(user_id), username=username)
        return UserRemoved(status=True, message="User was deleted successfully")

    async def find_user_by_email(self, email: str) -> User | None:
        """Return the user owning ``email``, if any."""
        return await User.objects.filter(email=email).afirst()

    async def _ensure_available(self, user: User, changes: dict[str, Any]) -> None:
        """Raise ConflictError if a changed unique field is taken."""
        others = User.objects.exclude(pk=user.pk)
        email = changes.get("email")
        if email is not None and email != user.email and await others.filter(email=email).aexists():
            raise ConflictError("Email already exists")
        username = changes.get("username")
        if (
            username is not None
            and username != user.username
            and await others.filter(username=username).aexists()
        ):
            raise ConflictError("Username already exists")

    # Cart

    async def add_to_cart(self, user_id: UUID | str, product_id: UUID | str) -> ServiceMessage:
        """
        Append a product id to the user's cart.

        Duplicates are kept: adding the same product twice lists it twice.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.get_user_by_id(user_id)
        user.cart = user.cart or []
        user.cart.append(str(product_id))
        await user.asave(update_fields=["cart"])

        logger.info("Cart updated", user_id=str(user.pk), product_id=str(product_id), size=len(user.cart))
        return ServiceMessage("Added successfully")

    async def remove_from_cart(self, user_id: UUID | str, product_id: UUID | str) -> ServiceMessage:
        """
        Remove the first occurrence of a product id from the cart.

        Raises:
            NotFoundError: If the user does not exist or the product is not in the cart.
        """
        user = await self.get_user_by_id(user_id)
        product_key = str(product_id)
        if not user.cart or product_key not in user.cart:
            raise NotFoundError("Product is not in the cart")

        user.cart.remove(product_key)
        await user.asave(update_fields=["cart"])

        logger.info("Cart updated", user_id=str(user.pk), removed=product_key, size=len(user.cart))
        return ServiceMessage("Removed successfully")

    async def clear_cart(self, user_id: UUID | str) -> ServiceMessage:
        """
        Empty the user's cart.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.get_user_by_id(user_id)
        user.cart = []
        await user.asave(update_fields=["cart"])

        logger.info("Cart cleared", user_id=str(user.pk))
        return ServiceMessage("Cart cleared")

    async def get_products_in_cart(self, user_id: UUID | str) -> list[Product] | ServiceMessage:
        """
        Resolve the cart to products, in cart order.

        Products are fetched one at a time; the first id that fails to
        resolve aborts the whole call.

        Returns:
            The products, or ``CART_EMPTY`` when the cart is empty or unset.

        Raises:
            NotFoundError: If the user, or any product in the cart, does not exist.
        """
        user = await self.get_user_by_id(user_id)
        if not user.cart:
            return CART_EMPTY

        products = []
        for product_id in user.cart:
            products.append(await self._products.get_product(product_id))
        return products

    # Reminders

    async def notify_user(self, user_id: UUID | str, should_notify: bool) -> ServiceMessage:
        """
        Enable or disable the daily cart reminder for a user.

        Nothing is scheduled or cancelled while the cart is empty. Enabling
        replaces any reminder already registered for the user.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.get_user_by_id(user_id)
        if not user.cart:
            return CART_EMPTY

        if should_notify:
            key = reminder_job_key(user.pk)
            job = self._registry.add_job(key, self._reminder, self._reminder_spec, args=(str(user.pk),))
            job.start()
            logger.info("Cart reminder scheduled", user_id=str(user.pk), key=key, cron=str(self._reminder_spec))
            return ServiceMessage(REMINDER_ENABLED)

        self._cancel_reminder(user.pk)
        return ServiceMessage(REMINDER_DISABLED)

    def _cancel_reminder(self, user_id: UUID | str) -> None:
        """Stop and deregister the user's reminder if one exists."""
        key = reminder_job_key(user_id)
        job = self._registry.get_job(key)
        if job is None:
            logger.info("No cart reminder to cancel", user_id=str(user_id), key=key)
            return

        job.stop()
        self._registry.delete_job(key)
        logger.info("Cart reminder cancelled", user_id=str(user_id), key=key)
