"""JSON-file-backed implementations of ProductRepository and CategoryRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.read():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._file.read():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, product: Product) -> None:
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    # stock is owned by the ledger methods; keep the stored counter
                    updated = self._to_raw(product)
                    updated["stock"] = raw.get("stock")
                    records[i] = updated
                    break
            else:
                records.append(self._to_raw(product))

    def delete(self, product_id: str) -> bool:
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == product_id:
                    del records[i]
                    return True
        return False

    # --- Stock ledger ---------------------------------------------------------

    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        # check and write under one lock: compare-and-decrement
        with self._file.transaction() as records:
            for raw in records:
                if raw["id"] != product_id:
                    continue
                stock = raw.get("stock")
                if stock is None or stock < quantity:
                    return False
                raw["stock"] = stock - quantity
                return True
        return False

    def increment_stock(self, product_id: str, quantity: int) -> None:
        with self._file.transaction() as records:
            for raw in records:
                if raw["id"] == product_id and raw.get("stock") is not None:
                    raw["stock"] += quantity
                    return

    def set_stock(self, product_id: str, quantity: int | None) -> bool:
        with self._file.transaction() as records:
            for raw in records:
                if raw["id"] == product_id:
                    raw["stock"] = quantity
                    return True
        return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category_id": product.category_id,
            "stock": product.stock,
            "discount_price": (
                str(product.discount_price.amount)
                if product.discount_price is not None
                else None
            ),
            "discount_active": product.discount_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        discount = raw.get("discount_price")
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), currency),
            category_id=raw.get("category_id"),
            stock=raw.get("stock"),
            discount_price=Money(Decimal(discount), currency) if discount is not None else None,
            discount_active=raw.get("discount_active", False),
        )


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, category_id: str) -> Category | None:
        for raw in self._file.read():
            if raw["id"] == category_id:
                return Category(id=raw["id"], name=raw["name"])
        return None

    def get_by_name(self, name: str) -> Category | None:
        for raw in self._file.read():
            if raw["name"].lower() == name.lower():
                return Category(id=raw["id"], name=raw["name"])
        return None

    def list_all(self) -> list[Category]:
        return [Category(id=raw["id"], name=raw["name"]) for raw in self._file.read()]

    def save(self, category: Category) -> None:
        record = {"id": category.id, "name": category.name}
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == category.id:
                    records[i] = record
                    break
            else:
                records.append(record)

    def delete(self, category_id: str) -> bool:
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == category_id:
                    del records[i]
                    return True
        return False
