"""Shared BDD fixtures and step definitions for the Fulfillment domain."""

import pytest
from fulfillment.delivery.delivery import Delivery, DeliveryStatus
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(parsers.cfparse('a delivery in status "{status}"'), target_fixture="delivery")
def delivery_in_status(status):
    delivery = Delivery.create(
        order_id="ord-001",
        courier_id="courier-001",
        recipient={
            "email": "jane@example.com",
            "first_name": "Jane",
            "last_name": "Doe",
            "phone_number": "+1-555-0100",
        },
        address={"street": "1 Main St", "city": "Springfield", "postal_code": "12345", "state": "IL"},
    )
    delivery.status = DeliveryStatus(status).value
    delivery._events.clear()
    return delivery


@when(parsers.cfparse('the delivery is moved to "{status}"'))
def move_delivery(delivery, error, status):
    try:
        delivery.change_status(DeliveryStatus(status))
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the delivery is canceled for user "{user_id}"'))
def cancel_delivery(delivery, error, user_id):
    try:
        delivery.change_status(DeliveryStatus.CANCELED, user_id=user_id)
    except ValidationError as exc:
        error["exc"] = exc


@then(parsers.cfparse('the delivery status is "{status}"'))
def delivery_status_is(delivery, status):
    assert delivery.status == status


@then("the delivery action fails with a validation error")
def delivery_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} delivery event is raised"))
def delivery_event_raised(delivery, event_type):
    assert any(
        type(e).__name__ == event_type for e in delivery._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in delivery._events]}"


@then(parsers.cfparse('the cancellation names user "{user_id}"'))
def cancellation_names_user(delivery, user_id):
    assert delivery._events[-1].user_id == user_id
