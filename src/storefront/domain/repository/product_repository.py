"""Abstract repositories for the catalog (Product, Category).

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new product, or the catalog fields of an existing one.

        The stock counter of an existing product is never written here; it
        only changes through the stock-ledger methods below.
        """

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; return False if it did not exist."""

    # --- Stock ledger ---------------------------------------------------------

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """Atomically take *quantity* units if at least that many are in stock.

        Returns True iff the counter was modified.  Products that do not
        track stock, and unknown products, are never modified.
        Implementations must check and write in one atomic step.
        """

    @abstractmethod
    def increment_stock(self, product_id: str, quantity: int) -> None:
        """Put *quantity* units back (compensation for a decrement)."""

    @abstractmethod
    def set_stock(self, product_id: str, quantity: int | None) -> bool:
        """Overwrite the stock counter; None stops tracking stock.

        Returns False if the product does not exist.
        """


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return a category by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category."""

    @abstractmethod
    def delete(self, category_id: str) -> bool:
        """Remove a category; return False if it did not exist."""
