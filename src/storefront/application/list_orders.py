"""Application service: List Orders use case (query).

Cancelled orders are listed too; they stay queryable for audit.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str | None = None) -> list[OrderDTO]:
        """List one user's orders, or every order when *user_id* is None."""
        if user_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_by_user(user_id)
        return [order_to_dto(order) for order in orders]
