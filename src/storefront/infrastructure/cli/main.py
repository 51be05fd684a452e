import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.catalog_commands import (
    category_add,
    category_delete,
    category_list,
    category_show,
    category_update,
    product_add,
    product_autocomplete,
    product_delete,
    product_list,
    product_search,
    product_stock,
    product_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
)
from storefront.infrastructure.cli.user_commands import user_add
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, carts and order placement"""
    configure_logging(settings())


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def user() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_stock)
product.add_command(product_delete)
product.add_command(product_search)
product.add_command(product_autocomplete)
category.add_command(category_add)
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_update)
category.add_command(category_delete)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_show)
user.add_command(user_add)
