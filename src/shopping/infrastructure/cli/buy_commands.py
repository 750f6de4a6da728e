"""CLI command for buying a cart of products."""

from __future__ import annotations

import click

from shopping.application.dto import PurchaseLineDTO
from shopping.domain.exceptions import DomainException, EntityNotFoundError
from shopping.domain.model.customer import Customer
from shopping.infrastructure.bootstrap import shopping_service


def _parse_item(raw: str) -> tuple[str, int]:
    """Parse 'milk=2' into ('milk', 2)."""
    name, sep, qty = raw.rpartition("=")
    if not sep or not name.strip():
        raise click.BadParameter(
            f"Invalid item format: '{raw}'. Use NAME=QTY (e.g. milk=2)"
        )
    try:
        return name.strip(), int(qty)
    except ValueError:
        raise click.BadParameter(f"Quantity must be an integer in '{raw}'")


@click.command("buy")
@click.option("--customer-id", required=True, type=int, help="Customer ID.")
@click.option("--phone", required=True, help="Customer contact phone.")
@click.option(
    "--item", "items", multiple=True,
    help="Product and quantity as NAME=QTY. Repeatable.",
)
def buy(customer_id: int, phone: str, items: tuple[str, ...]) -> None:
    """Put items in the customer's cart and buy it."""
    service = shopping_service()
    cart = service.get_cart(Customer(customer_id, phone))

    try:
        for raw in items:
            name, qty = _parse_item(raw)
            product = service.get_product_by_name(name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{name}'")
            cart.add(product, qty)

        lines = list(cart.products.items())
        bought = service.buy(cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not bought:
        click.echo("Nothing to buy.")
        return

    for product, qty in lines:
        line = PurchaseLineDTO(product.name, qty, product.count)
        click.echo(f"Bought {line.quantity} x {line.product_name} ({line.remaining} left)")
