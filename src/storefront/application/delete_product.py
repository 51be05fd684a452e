"""Application service: Delete Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Remove a product from the catalog.

        Carts still holding it are left alone: they show the line as
        removed, and placing an order from them is refused.  Past orders
        keep their own snapshot of the product.
        """
        if not self._product_repo.delete(product_id):
            raise NotFoundError(f"Product with ID '{product_id}' not found")
