"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopping.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product and its stock as displayed to the user."""

    name: str
    count: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(name=product.name, count=product.count)


@dataclass(frozen=True)
class PurchaseLineDTO:
    """Output: one bought line and the stock left afterwards."""

    product_name: str
    quantity: int
    remaining: int
