"""Order aggregate.

An order owns a snapshot of its line items, so later price or name
changes on products never alter a historical order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderLineItem:
    """Product name, quantity and price as they were when the order was placed."""

    product_id: str
    product_name: str
    quantity: Quantity
    price_at_order: Money

    @property
    def line_total(self) -> Money:
        return self.price_at_order * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    ``total`` is stored, not derived: it is computed once by ``place()``
    and persisted as-is.  Use ``Order.place()`` for new orders; the plain
    constructor is for repositories reconstituting stored orders.
    """

    id: int | None
    user_id: str
    items: list[OrderLineItem]
    total: Money
    address: str
    phone: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        user_id: str,
        items: list[OrderLineItem],
        address: str,
        phone: str,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        user_id = _required(user_id, "User ID")
        address = _required(address, "Address")
        phone = _required(phone, "Phone")
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total=Money.sum(item.line_total for item in items),
            address=address,
            phone=phone,
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition pending -> confirmed, once stock is reserved."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot confirm order - current status is {self.status.value}, "
                f"expected pending"
            )
        self.status = OrderStatus.CONFIRMED

    def cancel(self) -> None:
        """Transition pending|confirmed -> cancelled.

        A confirmed order can still be cancelled when a later commit step
        fails; stock must already have been restocked by then.
        """
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        self.status = OrderStatus.CANCELLED


def _required(value: str, label: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{label} is required")
    return str(value).strip()
