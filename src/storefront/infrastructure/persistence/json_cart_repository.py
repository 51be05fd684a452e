"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CartRepository interface ---------------------------------------------

    def get_by_user(self, user_id: str) -> Cart | None:
        for raw in self._file.read():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def save(self, cart: Cart) -> None:
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["user_id"] == cart.user_id:
                    records[i] = self._to_raw(cart)
                    break
            else:
                records.append(self._to_raw(cart))

    def clear(self, user_id: str) -> None:
        with self._file.transaction() as records:
            for raw in records:
                if raw["user_id"] == user_id:
                    raw["items"] = []

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price_at_add": str(item.price_at_add.amount),
                    "currency": item.price_at_add.currency,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            user_id=raw["user_id"],
            items=[
                CartItem(
                    product_id=i["product_id"],
                    quantity=Quantity(i["quantity"]),
                    price_at_add=Money(Decimal(i["price_at_add"]), i.get("currency", "USD")),
                )
                for i in raw["items"]
            ],
        )
