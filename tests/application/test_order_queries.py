"""Integration tests for the order query use cases."""

import pytest

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository


def _save_order(repo: FakeOrderRepository, user_id: str, cancelled: bool = False) -> Order:
    order = Order.place(
        user_id=user_id,
        items=[OrderLineItem("1", "Mug", Quantity(3), Money.of("4.00"))],
        address="1 Nile St",
        phone="0100000000",
    )
    if cancelled:
        order.cancel()
    else:
        order.confirm()
    repo.save(order)
    return order


class TestShowOrder:

    def test_show(self):
        repo = FakeOrderRepository()
        order = _save_order(repo, "u1")

        dto = ShowOrderHandler(repo).handle(order.id)

        assert dto.status == "confirmed"
        assert dto.total == "$12.00"
        assert dto.items[0].line_total == "$12.00"
        assert dto.address == "1 Nile St"

    def test_missing(self):
        with pytest.raises(NotFoundError, match="Order #3 not found"):
            ShowOrderHandler(FakeOrderRepository()).handle(3)


class TestListOrders:

    def test_by_user_includes_cancelled(self):
        repo = FakeOrderRepository()
        _save_order(repo, "u1")
        _save_order(repo, "u2")
        _save_order(repo, "u1", cancelled=True)

        dtos = ListOrdersHandler(repo).handle("u1")

        assert [(d.id, d.status) for d in dtos] == [(1, "confirmed"), (3, "cancelled")]

    def test_all(self):
        repo = FakeOrderRepository()
        _save_order(repo, "u1")
        _save_order(repo, "u2")
        assert len(ListOrdersHandler(repo).handle()) == 2
