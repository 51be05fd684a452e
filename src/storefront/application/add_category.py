"""Application service: Add Category use case."""

from __future__ import annotations

from storefront.application.identifiers import next_id
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        if self._category_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Category '{name.strip()}' already exists")

        category = Category(
            id=next_id(c.id for c in self._category_repo.list_all()),
            name=name.strip(),
        )
        self._category_repo.save(category)
        return category
