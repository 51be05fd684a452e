"""Product and Category aggregates.

Products live independently of carts and orders: prices, discounts and
stock change over time, while carts and orders keep their own price
snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Category:
    id: str
    name: str


@dataclass
class Product:
    """A product in the catalog.

    ``stock`` is ``None`` for products that do not track stock; those are
    never reserved or restocked by order placement.

    Invariants:
    - ``stock`` is ``None`` or >= 0
    - when ``discount_active``, ``discount_price`` < ``price``
    """

    id: str
    name: str
    price: Money
    category_id: str | None = None
    stock: int | None = None
    discount_price: Money | None = None
    discount_active: bool = False

    # --- Pricing --------------------------------------------------------------

    @property
    def final_price(self) -> Money:
        """Price a customer pays right now."""
        if self.discount_active and self.discount_price is not None:
            return self.discount_price
        return self.price

    @property
    def discount_percent(self) -> Decimal:
        if not self.discount_active or self.discount_price is None:
            return Decimal("0")
        return self.discount_price.percent_below(self.price)

    def reprice(
        self,
        price: Money | None = None,
        discount_price: Money | None = None,
        discount_active: bool | None = None,
    ) -> None:
        """Change any pricing field; omitted ones keep their current value.

        The discount rule is checked against the merged values.  Without an
        active discount the discount price tracks the list price.  Existing
        carts and orders keep the price they captured.
        """
        new_price = self.price if price is None else price
        active = self.discount_active if discount_active is None else discount_active
        new_discount = self.discount_price if discount_price is None else discount_price

        self._check_discount(new_price, new_discount, active)
        self.price = new_price
        self.discount_active = active
        self.discount_price = new_discount if active else new_price

    def update_price(self, new_price: Money) -> None:
        self.reprice(price=new_price)

    def apply_discount(self, discount_price: Money | None, active: bool) -> None:
        self.reprice(discount_price=discount_price, discount_active=active)

    @staticmethod
    def _check_discount(
        price: Money, discount_price: Money | None, active: bool
    ) -> None:
        if not active:
            return
        if discount_price is None:
            raise ValidationError("An active discount needs a discount price")
        if discount_price >= price:
            raise ValidationError(
                f"Discount price {discount_price} must be less than "
                f"the original price {price}"
            )

    # --- Stock ----------------------------------------------------------------

    @property
    def tracks_stock(self) -> bool:
        return self.stock is not None

    def set_stock(self, quantity: int | None) -> None:
        if quantity is not None and quantity < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = quantity

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        category_id: str | None = None,
        stock: int | None = None,
        discount_price: Money | None = None,
        discount_active: bool = False,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        product = Product(id=id, name=name.strip(), price=price, category_id=category_id)
        product.set_stock(stock)
        product.apply_discount(discount_price, discount_active)
        return product
