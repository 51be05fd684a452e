"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.application.identifiers import next_id
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        name: str,
        price: str,
        stock: int | None = None,
        category: str | None = None,
        discount_price: str | None = None,
        discount_active: bool = False,
    ) -> Product:
        """Add a new product to the catalog.

        *category* is a category name.  *stock* of None means the product
        does not track stock.
        """
        if name and self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        category_id = None
        if category:
            found = self._category_repo.get_by_name(category)
            if found is None:
                raise NotFoundError(f"Category not found: '{category}'")
            category_id = found.id

        product = Product.create(
            id=next_id(p.id for p in self._product_repo.list_all()),
            name=name,
            price=Money.of(price),
            category_id=category_id,
            stock=stock,
            discount_price=Money.of(discount_price) if discount_price is not None else None,
            discount_active=discount_active,
        )
        self._product_repo.save(product)
        return product
