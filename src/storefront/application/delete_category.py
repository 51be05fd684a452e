"""Application service: Delete Category use case."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def handle(self, category_id: str) -> None:
        """Delete an empty category.

        A category that still has products is refused; move or delete the
        products first.
        """
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category with ID '{category_id}' not found")

        in_use = sum(1 for p in self._product_repo.list_all() if p.category_id == category.id)
        if in_use:
            raise ValidationError(
                f"Category '{category.name}' still has {in_use} product(s)"
            )

        self._category_repo.delete(category.id)
