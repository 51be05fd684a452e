"""Application service: Update Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        price: str | None = None,
        discount_price: str | None = None,
        discount_active: bool | None = None,
    ) -> None:
        """Update a product's pricing; omitted fields keep their value.

        Lowering the price below an active discount price is rejected.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product.reprice(
            price=Money.of(price) if price is not None else None,
            discount_price=Money.of(discount_price) if discount_price is not None else None,
            discount_active=discount_active,
        )
        self._product_repo.save(product)
