"""Application service: Shopping.

The single authority that turns a Cart into a committed purchase
against inventory.  Product storage is an injected collaborator.
"""

from __future__ import annotations

import logging

from shopping.domain.exceptions import BuyError
from shopping.domain.model.cart import Cart
from shopping.domain.model.customer import Customer
from shopping.domain.model.product import Product
from shopping.domain.repository.product_repository import ProductRepository
from shopping.domain.service.cart_registry import CartRegistry

logger = logging.getLogger(__name__)


class ShoppingService:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_registry: CartRegistry | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cart_registry = cart_registry or CartRegistry()

    def get_cart(self, customer: Customer) -> Cart:
        """Return the customer's cart; the same instance on every call."""
        return self._cart_registry.resolve(customer)

    def get_all_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_product_by_name(self, name: str) -> Product | None:
        return self._product_repo.get_by_name(name)

    def buy(self, cart: Cart) -> bool:
        """Commit the cart against inventory.

        Returns False for an empty cart (nothing is validated or saved).

        Uses a two-phase approach:
          Phase 1 — validate: every line must still fit the product's
                    current stock.  Raises BuyError on the first line
                    that does not, before any mutation.
          Phase 2 — commit: decrement each product and save it, then
                    clear the cart.

        There is no rollback in phase 2.  If ``save()`` fails part way,
        earlier products stay decremented and saved, the failing one is
        decremented in memory only, the error propagates and the cart is
        left as it was.
        """
        if cart.is_empty:
            logger.info("Nothing to buy for customer %s", cart.customer.id)
            return False

        # Phase 1: validate all lines
        lines = list(cart.products.items())
        for product, quantity in lines:
            if quantity > product.count:
                logger.warning(
                    "Buy rejected for customer %s: need %d of %s, have %d",
                    cart.customer.id, quantity, product.name, product.count,
                )
                raise BuyError(product.name)

        # Phase 2: mutate and persist
        for product, quantity in lines:
            product.subtract_count(quantity)
            self._product_repo.save(product)

        cart.clear()
        logger.info(
            "Customer %s bought %d product(s)", cart.customer.id, len(lines)
        )
        return True
