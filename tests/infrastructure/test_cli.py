"""End-to-end tests of the click CLI over JSON files in a temp directory."""

import json
import logging

import pytest
import structlog
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_ENV", "test")
    for var in ("SMTP_HOST", "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, list(args), catch_exceptions=False)

    yield invoke

    # the CLI reconfigures logging for the process; undo it
    root.handlers, root.level = handlers, level
    structlog.reset_defaults()


@pytest.fixture
def shop(run):
    """A catalog with one stock-tracked product, one customer and a cart."""
    assert run("user", "add", "--name", "Alice", "--email", "alice@example.com").exit_code == 0
    assert run("category", "add", "--name", "Kitchen").exit_code == 0
    assert run(
        "product", "add", "--name", "Kettle", "--price", "10.00",
        "--stock", "5", "--category", "Kitchen",
    ).exit_code == 0
    return run


class TestCatalogCommands:

    def test_product_list(self, shop):
        result = shop("product", "list")
        assert result.exit_code == 0
        assert "Kettle" in result.output
        assert "$10.00" in result.output

    def test_discount_and_offers(self, shop):
        result = shop("product", "update", "--id", "1", "--discount-price", "8.00", "--discount")
        assert result.exit_code == 0

        result = shop("product", "list", "--offers")
        assert "$8.00" in result.output
        assert "20.00%" in result.output

    def test_invalid_discount_is_a_clean_error(self, shop):
        result = shop("product", "update", "--id", "1", "--discount-price", "12.00", "--discount")
        assert result.exit_code == 1
        assert "must be less than" in result.output

    def test_stock_requires_exactly_one_option(self, shop):
        result = shop("product", "stock", "--id", "1")
        assert result.exit_code == 2

    def test_category_list(self, shop):
        assert "Kitchen" in shop("category", "list").output

    def test_category_rename_and_delete(self, shop):
        assert "renamed to 'Cookware'" in shop(
            "category", "update", "--id", "1", "--name", "Cookware"
        ).output
        assert "Cookware" in shop("category", "show", "--id", "1").output

        result = shop("category", "delete", "--id", "1")
        assert result.exit_code == 1
        assert "still has 1 product" in result.output

        assert shop("product", "delete", "--id", "1").exit_code == 0
        assert shop("category", "delete", "--id", "1").exit_code == 0
        assert "No categories found." in shop("category", "list").output

    def test_search_and_autocomplete(self, shop):
        shop("product", "add", "--name", "Electric Kettle", "--price", "30.00")

        result = shop("product", "search", "kettle")
        assert result.exit_code == 0
        assert "Electric Kettle" in result.output

        result = shop("product", "autocomplete", "ke")
        assert "Kettle" in result.output
        assert "Electric" not in result.output

    def test_price_update_keeps_stock(self, shop, tmp_path):
        assert shop("product", "update", "--id", "1", "--price", "12.00").exit_code == 0

        [product] = json.loads((tmp_path / "products.json").read_text())
        assert product["stock"] == 5
        assert product["price"] == "12.00"


class TestOrderFlow:

    def test_place_order_from_cart(self, shop, tmp_path):
        assert shop("cart", "add", "--user", "1", "--product", "1", "--qty", "2").exit_code == 0

        result = shop("order", "place", "--user", "1", "--address", "1 Nile St", "--phone", "0100")

        assert result.exit_code == 0
        assert "Order #1  (status=confirmed)" in result.output
        assert "$20.00" in result.output

        products = json.loads((tmp_path / "products.json").read_text())
        assert products[0]["stock"] == 3
        assert "is empty" in shop("cart", "show", "--user", "1").output

    def test_insufficient_stock_cancels(self, shop, tmp_path):
        shop("product", "stock", "--id", "1", "--quantity", "1")
        shop("cart", "add", "--user", "1", "--product", "1", "--qty", "1")
        shop("product", "stock", "--id", "1", "--quantity", "0")

        result = shop("order", "place", "--user", "1", "--address", "1 Nile St", "--phone", "0100")

        assert result.exit_code == 1
        assert "Insufficient stock for Kettle" in result.output
        assert "cancelled" in shop("order", "show", "--id", "1").output
        assert "Kettle" in shop("cart", "show", "--user", "1").output

    def test_empty_cart(self, shop):
        result = shop("order", "place", "--user", "1", "--address", "x", "--phone", "y")
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_order_list(self, shop):
        shop("cart", "add", "--user", "1", "--product", "1")
        shop("order", "place", "--user", "1", "--address", "x", "--phone", "y")

        result = shop("order", "list", "--user", "1")

        assert result.exit_code == 0
        assert "confirmed" in result.output

    def test_show_missing_order(self, run):
        result = run("order", "show", "--id", "99")
        assert result.exit_code == 1
        assert "Order #99 not found" in result.output
