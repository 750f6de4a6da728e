"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopping.application.add_product import AddProductHandler
from shopping.application.dto import ProductDTO
from shopping.domain.exceptions import DomainException
from shopping.infrastructure.bootstrap import product_repository, shopping_service


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--count", required=True, type=int, help="Units in stock.")
def product_add(name: str, count: int) -> None:
    """Add a new product with its stock."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, count=count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added with {product.count} in stock")


@click.command("list")
def product_list() -> None:
    """List all products and their stock."""
    products = [ProductDTO.from_product(p) for p in shopping_service().get_all_products()]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'In stock':>10}")
    click.echo("-" * 31)
    for p in products:
        click.echo(f"{p.name:<20} {p.count:>10}")


@click.command("show")
@click.option("--name", required=True, help="Product name.")
def product_show(name: str) -> None:
    """Show a single product."""
    product = shopping_service().get_product_by_name(name)
    if product is None:
        raise click.ClickException(f"Product not found: '{name}'")

    click.echo(f"{product.name}: {product.count} in stock")
