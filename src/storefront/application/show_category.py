"""Application service: Show Category use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import CategoryRepository


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category with ID '{category_id}' not found")
        return category
