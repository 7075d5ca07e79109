"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.order import Order, OrderStatus
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("an order of {quantity:d} units at {price:f}"), target_fixture="order")
def order_of_units(quantity, price):
    order = Order.create(
        user_id="user-001",
        items_data=[{"product_id": "prod-001", "product_name": "Widget", "unit_price": price, "quantity": quantity}],
    )
    order._events.clear()
    return order


@given(parsers.cfparse('an order in status "{status}"'), target_fixture="order")
def order_in_status(status):
    order = Order.create(
        user_id="user-001",
        items_data=[{"product_id": "prod-001", "product_name": "Widget", "unit_price": 50.0, "quantity": 1}],
    )
    order.status = OrderStatus(status).value
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the order is moved to "{status}"'))
def move_order(order, error, status):
    try:
        order.change_status(OrderStatus(status))
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the order is completed with delivery status "{delivery_status}"'))
def complete_order(order, error, delivery_status):
    try:
        order.complete(delivery_status)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("the order total is {total:f}"))
def order_total_is(order, total):
    assert order.total_price == pytest.approx(total)


@then("the order action fails with a validation error")
def order_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('an OrderStatusChanged event from "{previous}" to "{new}" is raised'))
def status_changed_event_raised(order, previous, new):
    events = [e for e in order._events if type(e).__name__ == "OrderStatusChanged"]
    raised = [type(e).__name__ for e in order._events]
    assert len(events) == 1, f"Expected one OrderStatusChanged event. Events: {raised}"
    assert (events[-1].previous_status, events[-1].new_status) == (previous, new)
