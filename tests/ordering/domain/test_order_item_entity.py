"""Tests for OrderItem entity."""

import pytest
from ordering.order.order import OrderItem
from protean.exceptions import ValidationError


class TestOrderItemConstruction:
    def test_basic_construction(self):
        item = OrderItem(product_id="prod-001", quantity=2, unit_price=12.5)
        assert item.product_id == "prod-001"
        assert item.quantity == 2
        assert item.unit_price == 12.5

    def test_item_gets_an_identity(self):
        item = OrderItem(product_id="prod-001", quantity=1, unit_price=1.0)
        assert item.id is not None

    def test_free_item_is_allowed(self):
        item = OrderItem(product_id="prod-001", quantity=1, unit_price=0.0)
        assert item.subtotal == 0.0


class TestOrderItemValidation:
    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValidationError):
            OrderItem(product_id="prod-001", quantity=quantity, unit_price=10.0)

    def test_unit_price_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id="prod-001", quantity=1, unit_price=-0.01)

    def test_product_is_required(self):
        with pytest.raises(ValidationError):
            OrderItem(quantity=1, unit_price=10.0)


class TestOrderItemSubtotal:
    def test_subtotal_is_quantity_times_unit_price(self):
        item = OrderItem(product_id="prod-001", quantity=7, unit_price=10.42)
        assert item.subtotal == 72.94
