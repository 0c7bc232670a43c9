"""Catalog service for reading and maintaining products."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ValidationError

from apps.catalog.models import Product
from core.exceptions import NotFoundError
from core.logging import get_logger
from services.types import ServiceMessage

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from services.catalog.types import NewProduct

logger = get_logger(__name__)

PRODUCT_NOT_FOUND = "Product not found"

# Fields that may be changed through ``update``
UPDATABLE_FIELDS = frozenset(
    {
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
    }
)


class ProductService:
    """CRUD operations on catalog products."""

    async def get_product(self, product_id: UUID | str) -> Product:
        """
        Resolve a product id to its record.

        Args:
            product_id: Product primary key (UUID or its string form).

        Returns:
            The product.

        Raises:
            NotFoundError: If no product has this id, or the id is malformed.
        """
        try:
            return await Product.objects.aget(pk=product_id)
        except (Product.DoesNotExist, ValidationError) as e:
            raise NotFoundError(PRODUCT_NOT_FOUND) from e

    async def find_all(self, category: str | None = None) -> list[Product]:
        """Return all products, optionally restricted to one category."""
        queryset = Product.objects.all()
        if category:
            queryset = queryset.filter(category=category)
        return [product async for product in queryset]

    async def create(self, data: NewProduct, owner_id: UUID | str | None = None) -> Product:
        """
        Store a new product.

        Args:
            data: Product fields.
            owner_id: Id of the user listing the product.

        Returns:
            The stored product.
        """
        product = await Product.objects.acreate(user_id=owner_id, **asdict(data))
        logger.info("Product created", product_id=str(product.id), category=product.category)
        return product

    async def update(self, product_id: UUID | str, changes: Mapping[str, Any]) -> Product:
        """
        Merge ``changes`` onto a product and save it.

        Unknown keys are ignored.

        Raises:
            NotFoundError: If the product does not exist.
        """
        product = await self.get_product(product_id)
        fields = [name for name in changes if name in UPDATABLE_FIELDS]
        for name in fields:
            setattr(product, name, changes[name])
        await product.asave(update_fields=[*fields, "updated_at"])
        logger.info("Product updated", product_id=str(product.id), fields=fields)
        return product

    async def remove(self, product_id: UUID | str) -> ServiceMessage:
        """
        Delete a product.

        Raises:
            NotFoundError: If the product does not exist.
        """
        product = await self.get_product(product_id)
        await product.adelete()
        logger.info("Product deleted", product_id=str(product_id))
        return ServiceMessage("Product was deleted successfully")
