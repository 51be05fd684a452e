"""Application service: Rename Category use case."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import CategoryRepository


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str, name: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category with ID '{category_id}' not found")
        if not name or not name.strip():
            raise ValidationError("Category name is required")

        clash = self._category_repo.get_by_name(name.strip())
        if clash is not None and clash.id != category.id:
            raise ValidationError(f"Category '{name.strip()}' already exists")

        category.name = name.strip()
        self._category_repo.save(category)
        return category
