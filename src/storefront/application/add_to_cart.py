"""Application service: Add To Cart use case.

Creates the user's cart on first use.  The product's current final
price (after any active discount) is captured on the cart line.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.show_cart import build_cart_dto
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        cart = self._cart_repo.get_by_user(user_id) or Cart(user_id=user_id)
        cart.add_item(product, quantity)
        self._cart_repo.save(cart)
        return build_cart_dto(cart, self._product_repo)
