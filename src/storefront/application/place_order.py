"""Application service: Place Order use case.

Turns a user's cart into an order:

1. snapshot the cart into line items and persist a *pending* order,
2. reserve stock (conditional decrements recorded on a saga),
3. confirm and persist the order, then run the confirmation hooks
   (by default: empty the cart),
4. notify the customer and the shop, best-effort.

If anything in steps 2-3 fails, the saga restocks every unit taken, the
order is persisted as *cancelled* and the original error is re-raised.
The cart is only emptied by a confirmation hook, so a failed attempt
leaves it untouched for a retry.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.order_notifications import OrderNotificationDispatcher
from storefront.domain.exceptions import EmptyCartError, NotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.saga import Saga
from storefront.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = structlog.get_logger(__name__)

ConfirmationHook = Callable[[Order], None]


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        notifier: OrderNotificationDispatcher | None = None,
        on_confirmed: list[ConfirmationHook] | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._notifier = notifier
        self._reservations = StockReservationService(product_repo)
        if on_confirmed is None:
            on_confirmed = [self._clear_cart]
        self._on_confirmed = list(on_confirmed)

    def handle(self, user_id: str, address: str, phone: str) -> OrderDTO:
        for value, label in ((user_id, "User ID"), (address, "Address"), (phone, "Phone")):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError(f"Cart is empty for user '{user_id}'")

        order = Order.place(
            user_id=user_id,
            items=self._snapshot(cart),
            address=address,
            phone=phone,
        )
        self._order_repo.save(order)

        log = logger.bind(order_id=order.id, user_id=order.user_id)
        log.info("order_pending", total=str(order.total), lines=len(order.items))

        saga = Saga(f"place-order-{order.id}")
        try:
            self._reservations.reserve_for_order(order, saga)
            order.confirm()
            self._order_repo.save(order)
            for hook in self._on_confirmed:
                hook(order)
        except Exception as exc:
            log.warning("order_placement_failed", error=str(exc), error_type=type(exc).__name__)
            saga.compensate()
            try:
                order.cancel()
                self._order_repo.save(order)
            except Exception:
                log.exception("order_cancel_persist_failed")
            raise exc

        log.info("order_confirmed", total=str(order.total))

        if self._notifier is not None:
            self._notifier.dispatch(order)

        return order_to_dto(order)

    # --- Steps ----------------------------------------------------------------

    def _snapshot(self, cart: Cart) -> list[OrderLineItem]:
        """Freeze the cart into order lines: current product name, cart price."""
        lines: list[OrderLineItem] = []
        for item in cart.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                raise NotFoundError(
                    f"Product ID '{item.product_id}' in cart no longer exists"
                )
            lines.append(
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    price_at_order=item.price_at_add,
                )
            )
        return lines

    def _clear_cart(self, order: Order) -> None:
        self._cart_repo.clear(order.user_id)
