import logging

import click

from shopping.infrastructure.cli.buy_commands import buy
from shopping.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log purchase activity.")
def cli(verbose: bool) -> None:
    """Shopping — inventory, carts and purchases"""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
cli.add_command(buy)
