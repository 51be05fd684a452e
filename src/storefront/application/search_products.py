"""Application services: product search and name autocomplete (queries).

Search matches whole words of the keyword anywhere in the product name,
best matches first.  Autocomplete matches a name prefix, alphabetically.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class SearchProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, keyword: str, page: int = 1, limit: int = 10) -> list[ProductDTO]:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")
        terms = {t for t in (keyword or "").lower().split() if t}
        if not terms:
            return []

        scored = []
        for product in self._product_repo.list_all():
            words = set(product.name.lower().split())
            score = len(terms & words)
            if score:
                scored.append((score, product))
        # sort is stable: equal scores keep catalog order
        scored.sort(key=lambda pair: pair[0], reverse=True)

        names = {c.id: c.name for c in self._category_repo.list_all()}
        start = (page - 1) * limit
        return [
            product_to_dto(p, names.get(p.category_id))
            for _, p in scored[start:start + limit]
        ]


class AutocompleteProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, prefix: str, limit: int = 5) -> list[ProductDTO]:
        prefix = (prefix or "").strip().lower()
        if not prefix:
            return []
        matches = sorted(
            (p for p in self._product_repo.list_all() if p.name.lower().startswith(prefix)),
            key=lambda p: p.name.lower(),
        )
        return [product_to_dto(p) for p in matches[:limit]]
