"""Cart aggregate: one per user, keyed by user id."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    product_id: str
    quantity: Quantity
    price_at_add: Money  # final price when the item was first added

    @property
    def line_total(self) -> Money:
        return self.price_at_add * self.quantity.value


@dataclass
class Cart:
    """Items a user intends to order.

    Invariants:
    - each product appears at most once
    - every quantity is >= 1 (enforced by ``Quantity``)
    """

    user_id: str
    items: list[CartItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Money:
        return Money.sum(item.line_total for item in self.items)

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """Add *quantity* units of *product*, merging with an existing line."""
        qty = Quantity(quantity)
        existing = self._find(product.id)
        wanted = qty if existing is None else existing.quantity + qty
        self._check_stock(product, wanted)

        if existing is not None:
            existing.quantity = wanted
            return existing

        item = CartItem(
            product_id=product.id,
            quantity=qty,
            price_at_add=product.final_price,
        )
        self.items.append(item)
        return item

    def update_quantity(self, product: Product, quantity: int) -> None:
        item = self._get(product.id)
        qty = Quantity(quantity)
        self._check_stock(product, qty)
        item.quantity = qty

    def remove_item(self, product_id: str) -> None:
        item = self._get(product_id)
        self.items.remove(item)

    def clear(self) -> None:
        self.items = []

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def _get(self, product_id: str) -> CartItem:
        item = self._find(product_id)
        if item is None:
            raise NotFoundError(f"Product ID '{product_id}' is not in the cart")
        return item

    @staticmethod
    def _check_stock(product: Product, wanted: Quantity) -> None:
        if product.tracks_stock and wanted.value > product.stock:
            raise ValidationError(
                f"Only {product.stock} of {product.name} in stock "
                f"(requested {wanted.value})"
            )
