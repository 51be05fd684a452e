"""CLI commands for customer profiles."""

from __future__ import annotations

import click

from storefront.application.add_user import AddUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import user_repository


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Email for order confirmations.")
def user_add(name: str, email: str) -> None:
    """Register a customer."""
    handler = AddUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.name}' <{user.email}> added")
