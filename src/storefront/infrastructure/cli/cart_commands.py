"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, product_repository


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo(f"Cart of user {dto.user_id} is empty.")
        return

    click.echo(f"Cart of user {dto.user_id}")
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.price_at_add:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Cart Total':<34} {dto.total:>20}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a user's cart."""
    handler = AddToCartHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("update")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
def cart_update(user_id: str, product_id: str, quantity: int) -> None:
    """Change the quantity of a cart item."""
    handler = UpdateCartItemHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from a user's cart."""
    handler = RemoveCartItemHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("show")
@click.option("--user", "user_id", required=True, help="User ID.")
def cart_show(user_id: str) -> None:
    """Show a user's cart."""
    handler = ShowCartHandler(cart_repo=cart_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)
