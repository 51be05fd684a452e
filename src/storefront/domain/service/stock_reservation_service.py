"""Domain service: Stock Reservation.

Reserves stock for every line of an order through the product
repository's conditional decrement.  There is no read-then-write: two
orders racing for the last unit both ask the store to decrement "only if
stock >= qty", and exactly one of them wins.

Each successful decrement records a matching restock on the caller's
saga, so a failure anywhere later in placement returns every unit taken.
"""

from __future__ import annotations

from functools import partial

import structlog

from storefront.domain.exceptions import InsufficientStockError, NotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.saga import Saga

logger = structlog.get_logger(__name__)


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve_for_order(self, order: Order, saga: Saga) -> None:
        """Decrement stock for each stock-tracked line item of *order*.

        Raises InsufficientStockError at the first line whose condition
        fails; lines before it stay decremented until the saga is unwound.
        """
        for line in order.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise NotFoundError(f"Product '{line.product_name}' no longer exists")
            if not product.tracks_stock:
                continue

            qty = line.quantity.value
            if not self._product_repo.decrement_stock(product.id, qty):
                raise InsufficientStockError(
                    f"Insufficient stock for {line.product_name} (need {qty})"
                )

            logger.debug(
                "stock_reserved",
                order_id=order.id,
                product_id=product.id,
                quantity=qty,
            )
            saga.record(
                f"restock {qty} x {line.product_name}",
                partial(self._product_repo.increment_stock, product.id, qty),
            )
