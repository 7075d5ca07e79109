"""Shared BDD fixtures and step definitions for the Shopping domain."""

from uuid import uuid4

import pytest
from pytest_bdd import given, parsers, then, when
from shopping.cart.items import add_item_to_cart
from shopping.cart.management import find_cart
from shopping.checkout.orchestrator import CheckoutOrchestrator
from shopping.checkout.outcome import CartError, CheckoutRequest


@pytest.fixture()
def user_id():
    return f"user-{uuid4().hex[:8]}"


@pytest.fixture()
def attempt():
    """Container for the checkout outcome."""
    return {"outcome": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalog stocks {stock:d} of "{product_id}" at {price:f}'))
def catalog_stocks(catalogue, stock, product_id, price):
    catalogue.add_product(product_id, title=product_id.title(), price=price, quantity_in_stock=stock)


@given(parsers.cfparse('the user has {quantity:d} of "{product_id}" in the cart'))
def user_has_items(user_id, quantity, product_id):
    add_item_to_cart(user_id, product_id, quantity)


@given(parsers.cfparse('the catalog stock of "{product_id}" drops to {stock:d}'))
def stock_drops(catalogue, product_id, stock):
    product = catalogue.products[product_id]
    catalogue.add_product(product_id, title=product.title, price=product.price, quantity_in_stock=stock)


@given("the delivery cannot be created")
def delivery_fails(order_service):
    order_service.configure(create_delivery=False)


@given("the payment session cannot be created")
def payment_fails(order_service):
    order_service.configure(create_checkout=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the user checks out")
def user_checks_out(user_id, attempt):
    request = CheckoutRequest(
        courier_id="courier-001",
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        phone_number="+1-555-0100",
        street="1 Main St",
        city="Springfield",
        postal_code="12345",
        state="IL",
    )
    attempt["outcome"] = CheckoutOrchestrator().checkout(user_id, request)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the checkout succeeds with a payment link")
def checkout_succeeds(attempt):
    outcome = attempt["outcome"]
    assert not outcome.failed
    assert outcome.all_available
    assert outcome.checkout_url


@then(parsers.cfparse('the checkout fails with "{error}"'))
def checkout_fails(attempt, error):
    assert attempt["outcome"].error == CartError(error)


@then(parsers.cfparse('"{product_id}" is reported with {stock:d} in stock'))
def product_reported_short(attempt, product_id, stock):
    outcome = attempt["outcome"]
    assert not outcome.all_available
    reported = {product.product_id: product.quantity_in_stock for product in outcome.unavailable_products}
    assert reported == {product_id: stock}


@then(parsers.cfparse("the order was requested for {total:f}"))
def order_requested_for(order_service, total):
    assert order_service.calls[-1].total_price == pytest.approx(total)


@then("no order was requested")
def no_order_requested(order_service):
    assert order_service.calls == []


@then("the cart is gone")
def cart_is_gone(user_id):
    assert find_cart(user_id) is None


@then("the cart is kept")
def cart_is_kept(user_id):
    assert find_cart(user_id) is not None
