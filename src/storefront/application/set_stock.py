"""Application service: Set Stock use case."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int | None) -> None:
        """Set the stock counter of a product; None stops tracking stock."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product.set_stock(quantity)
        if not self._product_repo.set_stock(product_id, quantity):
            raise NotFoundError(f"Product with ID '{product_id}' not found")
