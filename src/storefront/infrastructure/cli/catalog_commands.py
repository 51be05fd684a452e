"""CLI commands for the catalog (Product, Category)."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.delete_category import DeleteCategoryHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.search_products import (
    AutocompleteProductsHandler,
    SearchProductsHandler,
)
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_category import ShowCategoryHandler
from storefront.application.update_category import UpdateCategoryHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import category_repository, product_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a product category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = category_repository().list_all()

    if not categories:
        click.echo("No categories found.")
        return

    for c in categories:
        click.echo(f"{c.id:<6} {c.name}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", type=int, default=None, help="Units in stock; omit to not track stock.")
@click.option("--category", default=None, help="Category name.")
@click.option("--discount-price", default=None, help="Discounted price.")
@click.option("--discount/--no-discount", "discount_active", default=False, help="Activate the discount.")
def product_add(
    name: str,
    price: str,
    stock: int | None,
    category: str | None,
    discount_price: str | None,
    discount_active: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock=stock,
            category=category,
            discount_price=discount_price,
            discount_active=discount_active,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.final_price}")


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--offers", is_flag=True, default=False, help="Only discounted products.")
def product_list(category: str | None, offers: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        products = handler.handle(category=category, offers_only=offers)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Final':>10} {'Off':>8} {'Stock':>7}")
    click.echo("-" * 66)
    for p in products:
        stock = "-" if p.stock is None else str(p.stock)
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.price:>10} {p.final_price:>10} "
            f"{p.discount_percent:>8} {stock:>7}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--discount-price", default=None, help="New discounted price.")
@click.option("--discount/--no-discount", "discount_active", default=None, help="Turn the discount on or off.")
def product_update(
    product_id: str,
    price: str | None,
    discount_price: str | None,
    discount_active: bool | None,
) -> None:
    """Update a product's price or discount."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        handler.handle(
            product_id=product_id,
            price=price,
            discount_price=discount_price,
            discount_active=discount_active,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=int, default=None, help="Units in stock.")
@click.option("--untracked", is_flag=True, default=False, help="Stop tracking stock for this product.")
def product_stock(product_id: str, quantity: int | None, untracked: bool) -> None:
    """Set the stock level of a product."""
    if untracked == (quantity is not None):
        raise click.UsageError("Give exactly one of --quantity or --untracked")

    handler = SetStockHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, quantity=None if untracked else quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if untracked:
        click.echo(f"Product #{product_id} no longer tracks stock")
    else:
        click.echo(f"Stock for product #{product_id} set to {quantity}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")


def _echo_products(products) -> None:
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.final_price:>10}")


@click.command("search")
@click.argument("keyword")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=10, show_default=True)
def product_search(keyword: str, page: int, limit: int) -> None:
    """Search products by words in their name."""
    handler = SearchProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        products = handler.handle(keyword, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return
    _echo_products(products)


@click.command("autocomplete")
@click.argument("prefix")
@click.option("--limit", type=int, default=5, show_default=True)
def product_autocomplete(prefix: str, limit: int) -> None:
    """Suggest product names starting with PREFIX."""
    products = AutocompleteProductsHandler(product_repo=product_repository()).handle(
        prefix, limit=limit
    )
    _echo_products(products)


@click.command("show")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_show(category_id: str) -> None:
    """Show one category."""
    handler = ShowCategoryHandler(category_repo=category_repository())

    try:
        c = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{c.id:<6} {c.name}")


@click.command("update")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New category name.")
def category_update(category_id: str, name: str) -> None:
    """Rename a category."""
    handler = UpdateCategoryHandler(category_repo=category_repository())

    try:
        c = handler.handle(category_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{c.id} renamed to '{c.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_delete(category_id: str) -> None:
    """Delete a category that has no products."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted")
