"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument was out of range or an invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BuyError(DomainException):
    """A cart could not be bought because stock ran short.

    This is an expected outcome: callers are meant to catch it and
    refresh the cart.
    """

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Insufficient stock for product '{product_name}'")
        self.product_name = product_name
