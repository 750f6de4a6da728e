"""Application service: Add Product use case."""

from __future__ import annotations

from shopping.domain.exceptions import ValidationError
from shopping.domain.model.product import Product
from shopping.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, count: int) -> Product:
        """Add a new product with its initial stock."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        product = Product(name=name, count=count)
        self._product_repo.save(product)
        return product
