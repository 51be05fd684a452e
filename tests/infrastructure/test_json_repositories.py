"""Tests for the JSON-file repositories, against a temporary directory."""

import threading

from storefront.application.update_product import UpdateProductHandler
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonCategoryRepository,
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository


def _product(pid: str = "1", stock: int | None = 5) -> Product:
    return Product.create(
        id=pid,
        name=f"Item{pid}",
        price=Money.of("12.50"),
        category_id="1",
        stock=stock,
        discount_price=Money.of("10.00"),
        discount_active=True,
    )


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.read_text(encoding="utf-8") == "[]"
        assert repo.list_all() == []

    def test_save_and_reload(self, tmp_path):
        JsonProductRepository(tmp_path / "p.json").save(_product())

        loaded = JsonProductRepository(tmp_path / "p.json").get_by_id("1")

        assert loaded == _product()
        assert loaded.final_price == Money.of("10.00")

    def test_get_by_name_case_insensitive(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product())
        assert repo.get_by_name("ITEM1").id == "1"

    def test_conditional_decrement(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product(stock=5))

        assert repo.decrement_stock("1", 3) is True
        assert repo.decrement_stock("1", 3) is False
        assert repo.get_by_id("1").stock == 2

    def test_decrement_untracked_or_missing_is_refused(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product(stock=None))

        assert repo.decrement_stock("1", 1) is False
        assert repo.decrement_stock("404", 1) is False
        assert repo.get_by_id("1").stock is None

    def test_increment(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product(stock=2))
        repo.increment_stock("1", 4)
        assert repo.get_by_id("1").stock == 6

    def test_concurrent_decrements_never_overdraw(self, tmp_path):
        JsonProductRepository(tmp_path / "p.json").save(_product(stock=10))
        results = []

        def take_one():
            # a separate instance per thread: the lock is per file, not per object
            repo = JsonProductRepository(tmp_path / "p.json")
            results.append(repo.decrement_stock("1", 1))

        threads = [threading.Thread(target=take_one) for _ in range(25)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 10
        assert JsonProductRepository(tmp_path / "p.json").get_by_id("1").stock == 0

    def test_save_keeps_stored_stock(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product(stock=5))
        stale = repo.get_by_id("1")
        repo.decrement_stock("1", 3)

        stale.update_price(Money.of("15.00"))
        repo.save(stale)

        loaded = repo.get_by_id("1")
        assert loaded.price == Money.of("15.00")
        assert loaded.stock == 2

    def test_reservation_during_price_update_is_kept(self, tmp_path):
        class ReservingRepository(JsonProductRepository):
            """Another checkout takes stock right after the update reads."""

            def get_by_id(self, product_id):
                product = super().get_by_id(product_id)
                self.decrement_stock(product_id, 3)
                return product

        JsonProductRepository(tmp_path / "p.json").save(_product(stock=5))

        UpdateProductHandler(ReservingRepository(tmp_path / "p.json")).handle("1", price="12")

        loaded = JsonProductRepository(tmp_path / "p.json").get_by_id("1")
        assert loaded.price == Money.of("12")
        assert loaded.stock == 2

    def test_set_stock(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product(stock=5))

        assert repo.set_stock("1", 9) is True
        assert repo.get_by_id("1").stock == 9
        assert repo.set_stock("1", None) is True
        assert repo.get_by_id("1").stock is None
        assert repo.set_stock("404", 1) is False

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product("1"))
        repo.save(_product("2"))

        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert [p.id for p in repo.list_all()] == ["2"]

    def test_writes_leave_no_temp_files(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "p.json")
        repo.save(_product())
        repo.decrement_stock("1", 1)

        assert [p.name for p in tmp_path.iterdir()] == ["p.json"]


class TestJsonCategoryRepository:

    def test_roundtrip(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "c.json")
        repo.save(Category(id="1", name="Kitchen"))
        repo.save(Category(id="1", name="Kitchenware"))

        assert repo.list_all() == [Category(id="1", name="Kitchenware")]
        assert repo.get_by_name("kitchenware").id == "1"

    def test_delete(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "c.json")
        repo.save(Category(id="1", name="Kitchen"))

        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert repo.list_all() == []


class TestJsonCartRepository:

    def test_save_and_clear(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        repo.save(Cart(user_id="u1", items=[
            CartItem(product_id="1", quantity=Quantity(2), price_at_add=Money.of("3.25")),
        ]))

        cart = repo.get_by_user("u1")
        assert cart.total == Money.of("6.50")

        repo.clear("u1")
        cleared = repo.get_by_user("u1")
        assert cleared is not None
        assert cleared.is_empty

    def test_missing_cart(self, tmp_path):
        assert JsonCartRepository(tmp_path / "carts.json").get_by_user("u1") is None


class TestJsonOrderRepository:

    def _order(self, user_id: str = "u1") -> Order:
        return Order.place(
            user_id=user_id,
            items=[OrderLineItem("1", "Mug", Quantity(2), Money.of("4.50"))],
            address="1 Nile St",
            phone="0100000000",
        )

    def test_assigns_ids_and_upserts(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first, second = self._order(), self._order("u2")
        repo.save(first)
        repo.save(second)
        first.confirm()
        repo.save(first)

        assert (first.id, second.id) == (1, 2)
        loaded = repo.get_by_id(1)
        assert loaded.status == OrderStatus.CONFIRMED
        assert loaded.total == Money.of("9.00")
        assert loaded.created_at == first.created_at
        assert loaded.items == first.items

    def test_list_by_user(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        for user_id in ("u1", "u2", "u1"):
            repo.save(self._order(user_id))
        assert [o.id for o in repo.list_by_user("u1")] == [1, 3]
        assert len(repo.list_all()) == 3


class TestJsonUserRepository:

    def test_roundtrip(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        repo.save(User(id="1", name="Alice", email="alice@example.com"))

        assert repo.get_by_id("1").name == "Alice"
        assert repo.get_by_email("ALICE@example.com").id == "1"
        assert repo.get_by_id("2") is None
