"""API serializers for users, carts and products."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from apps.catalog.models import Product
from services.catalog.types import NewProduct
from services.users.types import NewUser, PasswordUpdate, ProfileUpdate


class UserProfileSerializer(serializers.Serializer):
    """Read-only view of a user; never includes the password."""

    id = serializers.UUIDField(read_only=True)
    username = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    first_name = serializers.CharField(read_only=True)
    last_name = serializers.CharField(read_only=True)
    cart = serializers.ListField(child=serializers.CharField(), read_only=True, allow_null=True)
    is_active = serializers.BooleanField(read_only=True)
    date_joined = serializers.DateTimeField(read_only=True)


class UserCreateSerializer(serializers.Serializer):
    """Registration input."""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, max_length=128, write_only=True)
    first_name = serializers.CharField(max_length=150, required=False, default="")
    last_name = serializers.CharField(max_length=150, required=False, default="")

    def to_new_user(self) -> NewUser:
        """Return validated data as a NewUser."""
        return NewUser(**self.validated_data)


class ProfileUpdateSerializer(serializers.Serializer):
    """Profile update input; omitted fields are left unchanged."""

    username = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(required=False)
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True)

    def to_patch(self) -> ProfileUpdate:
        """Return validated data as a ProfileUpdate."""
        return ProfileUpdate(**self.validated_data)


class PasswordUpdateSerializer(serializers.Serializer):
    """Password update input."""

    password = serializers.CharField(min_length=8, max_length=128, write_only=True)

    def to_patch(self) -> PasswordUpdate:
        """Return validated data as a PasswordUpdate."""
        return PasswordUpdate(password=self.validated_data["password"])


class CartItemSerializer(serializers.Serializer):
    """Product to add to a cart."""

    product_id = serializers.UUIDField()


class ReminderSerializer(serializers.Serializer):
    """Cart reminder toggle."""

    should_notify = serializers.BooleanField()


class MessageSerializer(serializers.Serializer):
    """Informational response envelope."""

    message = serializers.CharField()


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product model."""

    owner_id = serializers.UUIDField(write_only=True, required=False, allow_null=True)

    class Meta:
        """Meta options for ProductSerializer."""

        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "category",
            "quantity",
            "images",
            "attributes",
            "specifications",
            "ratings",
            "reviews",
            "user",
            "owner_id",
            "in_stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "user", "in_stock", "created_at", "updated_at"]

    def to_new_product(self) -> NewProduct:
        """Return validated data as a NewProduct."""
        data: dict[str, Any] = {
            key: value
            for key, value in self.validated_data.items()
            if value is not None and key != "owner_id"
        }
        return NewProduct(**data)
