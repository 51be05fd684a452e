"""CLI commands for placing and inspecting orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository, place_order_handler


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Address:  {dto.address}")
    click.echo(f"Phone:    {dto.phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.price_at_order:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID placing the order.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--phone", required=True, help="Contact phone number.")
def order_place(user_id: str, address: str, phone: str) -> None:
    """Place an order from the user's cart (reserves stock, empties the cart)."""
    handler = place_order_handler()

    try:
        dto = handler.handle(user_id=user_id, address=address, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only this user's orders.")
def order_list(user_id: str | None) -> None:
    """List orders, newest last."""
    dtos = ListOrdersHandler(order_repo=order_repository()).handle(user_id)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<10} {'Status':<10} {'Total':>10}  Created")
    click.echo("-" * 58)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.user_id:<10} {dto.status:<10} {dto.total:>10}  {dto.created_at}"
        )
