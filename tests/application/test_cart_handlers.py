"""Integration tests for the cart use cases."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup() -> tuple[FakeCartRepository, FakeProductRepository]:
    products = [
        Product.create(id="1", name="Widget", price=Money.of("15.00"), stock=10),
        Product.create(
            id="2",
            name="Gadget",
            price=Money.of("25.00"),
            discount_price=Money.of("20.00"),
            discount_active=True,
        ),
    ]
    return FakeCartRepository(), FakeProductRepository(products)


class TestAddToCart:

    def test_creates_cart_on_first_add(self):
        carts, products = _setup()
        dto = AddToCartHandler(carts, products).handle("u1", "1", 2)

        assert dto.user_id == "u1"
        assert [(i.product_name, i.quantity, i.line_total) for i in dto.items] == [
            ("Widget", 2, "$30.00"),
        ]
        assert carts.get_by_user("u1") is not None

    def test_discounted_price_is_captured(self):
        carts, products = _setup()
        dto = AddToCartHandler(carts, products).handle("u1", "2", 1)
        assert dto.items[0].price_at_add == "$20.00"
        assert dto.total == "$20.00"

    def test_later_price_change_keeps_cart_price(self):
        carts, products = _setup()
        handler = AddToCartHandler(carts, products)
        handler.handle("u1", "1", 1)

        products.get_by_id("1").update_price(Money.of("99.00"))
        dto = handler.handle("u1", "1", 1)

        assert dto.items[0].quantity == 2
        assert dto.items[0].price_at_add == "$15.00"

    def test_unknown_product(self):
        carts, products = _setup()
        with pytest.raises(NotFoundError, match="not found"):
            AddToCartHandler(carts, products).handle("u1", "404", 1)

    def test_over_stock_rejected(self):
        carts, products = _setup()
        with pytest.raises(ValidationError, match="in stock"):
            AddToCartHandler(carts, products).handle("u1", "1", 11)

    def test_user_required(self):
        carts, products = _setup()
        with pytest.raises(ValidationError, match="User ID is required"):
            AddToCartHandler(carts, products).handle("", "1", 1)


class TestChangeCart:

    def test_update_quantity(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("u1", "1", 1)
        dto = UpdateCartItemHandler(carts, products).handle("u1", "1", 5)
        assert dto.items[0].quantity == 5

    def test_update_without_cart(self):
        carts, products = _setup()
        with pytest.raises(NotFoundError, match="No cart"):
            UpdateCartItemHandler(carts, products).handle("u1", "1", 5)

    def test_remove_item(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("u1", "1", 1)
        AddToCartHandler(carts, products).handle("u1", "2", 1)

        dto = RemoveCartItemHandler(carts, products).handle("u1", "1")

        assert [i.product_id for i in dto.items] == ["2"]

    def test_show_cart_marks_removed_products(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("u1", "1", 1)
        products._store.pop("1")

        dto = ShowCartHandler(carts, products).handle("u1")

        assert dto.items[0].product_name == "(removed)"

    def test_show_missing_cart(self):
        carts, products = _setup()
        with pytest.raises(NotFoundError):
            ShowCartHandler(carts, products).handle("nobody")
