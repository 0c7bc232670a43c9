"""Catalog service package."""

from services.catalog.service import ProductService
from services.catalog.types import NewProduct

__all__ = ["NewProduct", "ProductService"]
