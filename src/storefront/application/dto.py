"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without exposing
domain internals.  Monetary values are pre-formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    price_at_order: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    address: str
    phone: str
    created_at: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    price_at_add: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str | None
    price: str
    final_price: str
    discount_percent: str
    stock: int | None


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price_at_order=str(item.price_at_order),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        address=order.address,
        phone=order.phone,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def cart_to_dto(cart: Cart, product_names: dict[str, str]) -> CartDTO:
    """Map a cart; *product_names* resolves ids of products still in the catalog."""
    return CartDTO(
        user_id=cart.user_id,
        items=[
            CartLineDTO(
                product_id=item.product_id,
                product_name=product_names.get(item.product_id, "(removed)"),
                quantity=item.quantity.value,
                price_at_add=str(item.price_at_add),
                line_total=str(item.line_total),
            )
            for item in cart.items
        ],
        total=str(cart.total),
    )


def product_to_dto(product: Product, category_name: str | None = None) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=category_name,
        price=str(product.price),
        final_price=str(product.final_price),
        discount_percent=f"{product.discount_percent}%",
        stock=product.stock,
    )
