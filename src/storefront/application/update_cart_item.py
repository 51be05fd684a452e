"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.show_cart import build_cart_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class UpdateCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        """Set the quantity of a product already in the cart."""
        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise NotFoundError(f"No cart for user '{user_id}'")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        cart.update_quantity(product, quantity)
        self._cart_repo.save(cart)
        return build_cart_dto(cart, self._product_repo)
