"""Product aggregate.

A product is an inventory record: a unique name and how many units are
currently in stock.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopping.domain.exceptions import ValidationError


@dataclass(eq=False)
class Product:
    """A product and its available stock.

    Invariant: ``count`` is never negative.  The only mutation is
    ``subtract_count()`` which enforces it.

    Identity is the name, so a product reloaded from storage compares
    equal to (and hashes like) the instance already sitting in a cart.
    """

    name: str
    count: int = 0

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.count < 0:
            raise ValidationError(
                f"Product count cannot be negative, got {self.count}"
            )

    def subtract_count(self, amount: int) -> None:
        """Take *amount* units out of stock."""
        if amount < 0:
            raise ValidationError(
                f"Cannot subtract a negative amount ({amount}) from {self.name}"
            )
        if amount > self.count:
            raise ValidationError(
                f"Cannot subtract {amount} of {self.name} "
                f"— only {self.count} in stock"
            )
        self.count -= amount

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
