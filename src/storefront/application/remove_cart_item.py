"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.show_cart import build_cart_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class RemoveCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise NotFoundError(f"No cart for user '{user_id}'")

        cart.remove_item(product_id)
        self._cart_repo.save(cart)
        return build_cart_dto(cart, self._product_repo)
