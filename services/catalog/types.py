"""Types for the catalog service."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True, slots=True)
class NewProduct:
    """
    Data required to list a product.

    Attributes:
        name: Product name.
        price: Unit price.
        category: Catalog category.
        description: Long description.
        quantity: Units in stock.
        images: Image URLs.
        attributes: ``{name, value}`` attribute objects.
        specifications: Free-form specification object.
        ratings: Rating summary.
        reviews: Review objects.
    """

    name: str
    price: Decimal
    category: str
    description: str = ""
    quantity: int = 0
    images: list[str] = field(default_factory=list)
    attributes: list[dict[str, Any]] = field(default_factory=list)
    specifications: dict[str, Any] = field(default_factory=dict)
    ratings: dict[str, Any] = field(default_factory=dict)
    reviews: list[dict[str, Any]] = field(default_factory=list)
