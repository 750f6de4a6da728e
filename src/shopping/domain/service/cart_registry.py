"""Domain service: Cart Registry.

Owns the one-cart-per-customer mapping.  Carts are created lazily on
first access and then reused for the lifetime of the registry.
"""

from __future__ import annotations

import threading

from shopping.domain.model.cart import Cart
from shopping.domain.model.customer import Customer


class CartRegistry:

    def __init__(self) -> None:
        self._carts: dict[Customer, Cart] = {}
        self._lock = threading.Lock()

    def resolve(self, customer: Customer) -> Cart:
        """Return the customer's cart, creating an empty one if needed."""
        with self._lock:
            cart = self._carts.get(customer)
            if cart is None:
                cart = Cart(customer)
                self._carts[customer] = cart
            return cart

    def __contains__(self, customer: object) -> bool:
        return customer in self._carts

    def __len__(self) -> int:
        return len(self._carts)
