"""Tests for the Cart aggregate — items, quantities and totals."""

import pytest
from protean.exceptions import ValidationError
from shopping.cart.cart import Cart
from shopping.cart.events import CartCreated, CartItemAdded, CartItemQuantityChanged, CartItemRemoved


def _cart():
    cart = Cart.create(user_id="user-001")
    cart._events.clear()
    return cart


def _cart_with_widget(quantity=2):
    cart = _cart()
    cart.add_item(product_id="prod-001", product_name="Widget", unit_price=100.0, quantity=quantity)
    cart._events.clear()
    return cart


class TestCreate:
    def test_new_cart_is_empty(self):
        cart = Cart.create(user_id="user-001")
        assert cart.is_empty
        assert cart.total_price == 0.0
        assert isinstance(cart._events[0], CartCreated)


class TestAddItem:
    def test_add_new_item(self):
        cart = _cart()
        cart.add_item(product_id="prod-001", product_name="Widget", unit_price=100.0, quantity=2)

        assert len(cart.items) == 1
        assert cart.quantity_of("prod-001") == 2
        assert cart.total_price == 200.0
        assert isinstance(cart._events[0], CartItemAdded)

    def test_adding_same_product_increments(self):
        cart = _cart_with_widget(quantity=2)
        cart.add_item(product_id="prod-001", product_name="Widget", unit_price=100.0, quantity=3)

        assert len(cart.items) == 1
        assert cart.quantity_of("prod-001") == 5

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_refused(self, quantity):
        cart = _cart()
        with pytest.raises(ValidationError) as exc:
            cart.add_item(product_id="prod-001", product_name="Widget", unit_price=100.0, quantity=quantity)
        assert exc.value.messages["quantity"] == ["Quantity must be greater than zero."]
        assert cart.is_empty

    def test_total_over_several_items(self):
        cart = _cart_with_widget(quantity=2)
        cart.add_item(product_id="prod-002", product_name="Gadget", unit_price=19.99, quantity=3)
        assert cart.total_price == pytest.approx(259.97)


class TestChangeQuantity:
    def test_set_quantity(self):
        cart = _cart_with_widget(quantity=2)
        cart.change_item_quantity("prod-001", 4)

        assert cart.quantity_of("prod-001") == 4
        event = cart._events[0]
        assert isinstance(event, CartItemQuantityChanged)
        assert (event.previous_quantity, event.new_quantity) == (2, 4)

    def test_zero_removes_item(self):
        cart = _cart_with_widget()
        cart.change_item_quantity("prod-001", 0)

        assert cart.is_empty
        assert isinstance(cart._events[0], CartItemRemoved)

    def test_negative_is_refused(self):
        cart = _cart_with_widget(quantity=2)
        with pytest.raises(ValidationError):
            cart.change_item_quantity("prod-001", -1)
        assert cart.quantity_of("prod-001") == 2

    def test_missing_item(self):
        with pytest.raises(ValidationError):
            _cart().change_item_quantity("prod-404", 1)


class TestRemoveItem:
    def test_remove(self):
        cart = _cart_with_widget()
        cart.remove_item("prod-001")
        assert cart.is_empty

    def test_remove_missing_item(self):
        with pytest.raises(ValidationError):
            _cart().remove_item("prod-404")


class TestSnapshot:
    def test_snapshot_shape(self):
        cart = _cart_with_widget(quantity=2)
        assert cart.snapshot() == [
            {"product_id": "prod-001", "product_name": "Widget", "unit_price": 100.0, "quantity": 2},
        ]
