"""Unit tests for Product pricing, discounts and stock."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(**overrides) -> Product:
    fields = dict(id="1", name="Kettle", price=Money.of("100.00"))
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_defaults(self):
        p = _product()
        assert p.stock is None
        assert not p.tracks_stock
        assert p.discount_active is False
        assert p.discount_price == Money.of("100.00")
        assert p.final_price == Money.of("100.00")
        assert p.discount_percent == Decimal("0")

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            _product(name="  ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(stock=-1)

    def test_zero_stock_is_tracked(self):
        p = _product(stock=0)
        assert p.tracks_stock


class TestDiscount:

    def test_active_discount(self):
        p = _product(discount_price=Money.of("75.00"), discount_active=True)
        assert p.final_price == Money.of("75.00")
        assert p.discount_percent == Decimal("25.00")

    def test_discount_must_be_below_price(self):
        with pytest.raises(ValidationError, match="must be less than"):
            _product(discount_price=Money.of("100.00"), discount_active=True)

    def test_activating_without_discount_price_rejected(self):
        p = _product()
        # inactive discount price tracks the list price
        with pytest.raises(ValidationError, match="must be less than"):
            p.apply_discount(None, True)

    def test_deactivating_resets_discount_price(self):
        p = _product(discount_price=Money.of("75.00"), discount_active=True)
        p.apply_discount(None, False)
        assert p.discount_price == Money.of("100.00")
        assert p.final_price == Money.of("100.00")

    def test_price_cut_below_active_discount_rejected(self):
        p = _product(discount_price=Money.of("75.00"), discount_active=True)
        with pytest.raises(ValidationError, match="must be less than"):
            p.update_price(Money.of("50.00"))
        assert p.price == Money.of("100.00")

    def test_reprice_checks_merged_values(self):
        p = _product(discount_price=Money.of("75.00"), discount_active=True)
        p.reprice(price=Money.of("50.00"), discount_price=Money.of("40.00"))
        assert p.final_price == Money.of("40.00")
        assert p.discount_percent == Decimal("20.00")

    def test_price_change_without_discount_moves_discount_price(self):
        p = _product()
        p.update_price(Money.of("120.00"))
        assert p.discount_price == Money.of("120.00")
