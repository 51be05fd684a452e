"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        category: str | None = None,
        offers_only: bool = False,
    ) -> list[ProductDTO]:
        """List the catalog, optionally one category or discounted items only."""
        names = {c.id: c.name for c in self._category_repo.list_all()}

        products = self._product_repo.list_all()
        if category:
            found = self._category_repo.get_by_name(category)
            if found is None:
                raise NotFoundError(f"Category not found: '{category}'")
            products = [p for p in products if p.category_id == found.id]
        if offers_only:
            products = [p for p in products if p.final_price < p.price]

        return [product_to_dto(p, names.get(p.category_id)) for p in products]
