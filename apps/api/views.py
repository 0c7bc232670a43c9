"""API views for users, carts, reminders and products."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.serializers import (
    CartItemSerializer,
    MessageSerializer,
    PasswordUpdateSerializer,
    ProductSerializer,
    ProfileUpdateSerializer,
    ReminderSerializer,
    UserCreateSerializer,
    UserProfileSerializer,
)
from core.logging import get_logger
from services.catalog.service import ProductService
from services.types import ServiceMessage
from services.users.factory import build_user_service

if TYPE_CHECKING:
    from uuid import UUID

    from rest_framework.request import Request

    from services.users.service import UserService

logger = get_logger(__name__)


def _message(result: ServiceMessage) -> dict[str, Any]:
    return MessageSerializer(result).data


class UserServiceMixin:
    """Gives a view access to a UserService."""

    def get_user_service(self) -> UserService:
        """Return the service handling this request."""
        return build_user_service()


class UserListView(UserServiceMixin, APIView):
    """List users or register a new one."""

    def get(self, request: Request) -> Response:
        """Return all users without passwords."""
        users = async_to_sync(self.get_user_service().find_all)()
        return Response(UserProfileSerializer(users, many=True).data)

    def post(self, request: Request) -> Response:
        """Register a user; 409 if the email or username is taken."""
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = async_to_sync(self.get_user_service().create)(serializer.to_new_user())
        return Response(
            {
                "status": result.status,
                "message": result.message,
                "user": UserProfileSerializer(result.user).data,
            },
            status=status.HTTP_201_CREATED,
        )


class UserDetailView(UserServiceMixin, APIView):
    """Read, update or delete a user by username."""

    def get(self, request: Request, username: str) -> Response:
        """Return the user without the password."""
        profile = async_to_sync(self.get_user_service().get_current_user)(username)
        return Response(UserProfileSerializer(profile).data)

    def patch(self, request: Request, username: str) -> Response:
        """Merge the provided profile fields onto the user."""
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = async_to_sync(self.get_user_service().update)(username, serializer.to_patch())
        return Response({"message": result.message, "user": UserProfileSerializer(result.user).data})

    def delete(self, request: Request, username: str) -> Response:
        """Delete the user."""
        result = async_to_sync(self.get_user_service().remove)(username)
        return Response({"status": result.status, "message": result.message})


class PasswordView(UserServiceMixin, APIView):
    """Replace a user's password."""

    def put(self, request: Request, username: str) -> Response:
        """Set a new password."""
        serializer = PasswordUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = async_to_sync(self.get_user_service().update)(username, serializer.to_patch())
        return Response({"message": result.message, "user": UserProfileSerializer(result.user).data})


class CartView(UserServiceMixin, APIView):
    """Read, extend or clear a user's cart."""

    def get(self, request: Request, user_id: UUID) -> Response:
        """Return the cart's products, or the empty-cart message."""
        result = async_to_sync(self.get_user_service().get_products_in_cart)(user_id)
        if isinstance(result, ServiceMessage):
            return Response(_message(result))
        return Response(ProductSerializer(result, many=True).data)

    def post(self, request: Request, user_id: UUID) -> Response:
        """Append a product to the cart."""
        serializer = CartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = async_to_sync(self.get_user_service().add_to_cart)(
            user_id, serializer.validated_data["product_id"]
        )
        return Response(_message(result), status=status.HTTP_201_CREATED)

    def delete(self, request: Request, user_id: UUID) -> Response:
        """Empty the cart."""
        result = async_to_sync(self.get_user_service().clear_cart)(user_id)
        return Response(_message(result))


class CartItemView(UserServiceMixin, APIView):
    """Remove one product from a cart."""

    def delete(self, request: Request, user_id: UUID, product_id: str) -> Response:
        """Remove the first occurrence of the product."""
        result = async_to_sync(self.get_user_service().remove_from_cart)(user_id, product_id)
        return Response(_message(result))


class ReminderView(UserServiceMixin, APIView):
    """Turn the daily cart reminder on or off."""

    def post(self, request: Request, user_id: UUID) -> Response:
        """Enable or disable the reminder."""
        serializer = ReminderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = async_to_sync(self.get_user_service().notify_user)(
            user_id, serializer.validated_data["should_notify"]
        )
        return Response(_message(result))


class ProductListView(APIView):
    """List or create products."""

    def get(self, request: Request) -> Response:
        """Return products, optionally filtered by ``?category=``."""
        category = request.query_params.get("category")
        products = async_to_sync(ProductService().find_all)(category)
        return Response(ProductSerializer(products, many=True).data)

    def post(self, request: Request) -> Response:
        """Create a product."""
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = async_to_sync(ProductService().create)(
            serializer.to_new_product(), serializer.validated_data.get("owner_id")
        )
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """Read, update or delete a product."""

    def get(self, request: Request, product_id: UUID) -> Response:
        """Return the product."""
        product = async_to_sync(ProductService().get_product)(product_id)
        return Response(ProductSerializer(product).data)

    def patch(self, request: Request, product_id: UUID) -> Response:
        """Merge the provided fields onto the product."""
        serializer = ProductSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        changes = {k: v for k, v in serializer.validated_data.items() if k != "owner_id"}
        product = async_to_sync(ProductService().update)(product_id, changes)
        return Response(ProductSerializer(product).data)

    def delete(self, request: Request, product_id: UUID) -> Response:
        """Delete the product."""
        result = async_to_sync(ProductService().remove)(product_id)
        return Response(_message(result))
