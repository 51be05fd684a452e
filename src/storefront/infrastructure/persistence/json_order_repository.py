"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_user(self, user_id: str) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.read() if raw["user_id"] == user_id]

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, order: Order) -> None:
        with self._file.transaction() as records:
            if order.id is None:
                order.id = self._next_id(records)

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(records):
                if raw["id"] == order.id:
                    records[i] = self._to_raw(order)
                    break
            else:
                records.append(self._to_raw(order))

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        return max((raw["id"] for raw in records), default=0) + 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "address": order.address,
            "phone": order.phone,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "price_at_order": str(item.price_at_order.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                price_at_order=Money(Decimal(i["price_at_order"]), currency),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            total=Money(Decimal(raw["total"]), currency),
            address=raw["address"],
            phone=raw["phone"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
