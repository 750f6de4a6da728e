"""Cart — a customer's pending purchase.

The cart only records intent.  Adding a product checks it against the
stock visible at that moment but never reserves or decrements anything;
``ShoppingService.buy()`` re-checks every line before committing.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from shopping.domain.exceptions import ValidationError
from shopping.domain.model.customer import Customer
from shopping.domain.model.product import Product


class Cart:
    """Mapping of product -> requested quantity for one customer.

    Invariant: every recorded quantity is positive and, when it was
    added, did not exceed the product's stock.

    Not thread-safe; a cart belongs to a single customer session.
    """

    def __init__(self, customer: Customer) -> None:
        self.customer = customer
        self._items: dict[Product, int] = {}

    def add(self, product: Product, quantity: int) -> None:
        """Add *quantity* units of *product*, merging with any existing line."""
        if quantity < 0:
            raise ValidationError("quantity may not be negative")
        # Zero is accepted but not recorded; lines stay strictly positive.
        if quantity == 0:
            return

        total = self._items.get(product, 0) + quantity
        if total > product.count:
            raise ValidationError(
                f"cannot add product '{product.name}' to cart: insufficient stock"
            )
        # Re-keying keeps the freshest Product instance for this name.
        self._items.pop(product, None)
        self._items[product] = total

    @property
    def products(self) -> Mapping[Product, int]:
        """Read-only view of the cart lines."""
        return MappingProxyType(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        lines = ", ".join(f"{p.name}={q}" for p, q in self._items.items())
        return f"Cart(customer={self.customer.id}, items=[{lines}])"
