"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


def build_cart_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Map *cart*, resolving product names from the live catalog."""
    names: dict[str, str] = {}
    for item in cart.items:
        product = product_repo.get_by_id(item.product_id)
        if product is not None:
            names[product.id] = product.name
    return cart_to_dto(cart, names)


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise NotFoundError(f"No cart for user '{user_id}'")
        return build_cart_dto(cart, self._product_repo)
