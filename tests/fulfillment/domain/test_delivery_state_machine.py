"""Tests for Delivery state machine — every (from, to) pair of statuses."""

import pytest
from fulfillment.delivery.delivery import Delivery, DeliveryStatus
from protean.exceptions import ValidationError

ALLOWED = {
    (DeliveryStatus.PENDING, DeliveryStatus.IN_PROGRESS),
    (DeliveryStatus.PENDING, DeliveryStatus.CANCELED),
    (DeliveryStatus.IN_PROGRESS, DeliveryStatus.DELIVERED),
    (DeliveryStatus.IN_PROGRESS, DeliveryStatus.CANCELED),
}

ALL_PAIRS = [(current, target) for current in DeliveryStatus for target in DeliveryStatus]


def _delivery_in(status: DeliveryStatus) -> Delivery:
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
    delivery.status = status.value
    delivery._events.clear()
    return delivery


@pytest.mark.parametrize("current,target", ALL_PAIRS)
def test_can_transition_matches_lifecycle_table(current, target):
    assert _delivery_in(current).can_transition_to(target) is ((current, target) in ALLOWED)


@pytest.mark.parametrize("current,target", sorted(ALLOWED, key=lambda p: (p[0].value, p[1].value)))
def test_allowed_transition_changes_status(current, target):
    delivery = _delivery_in(current)
    delivery.change_status(target)
    assert delivery.status == target.value
    assert len(delivery._events) == 1


@pytest.mark.parametrize("current,target", [pair for pair in ALL_PAIRS if pair not in ALLOWED])
def test_refused_transition_raises_and_keeps_status(current, target):
    delivery = _delivery_in(current)
    with pytest.raises(ValidationError):
        delivery.change_status(target)
    assert delivery.status == current.value
    assert len(delivery._events) == 0


@pytest.mark.parametrize("terminal", [DeliveryStatus.DELIVERED, DeliveryStatus.CANCELED])
def test_terminal_status_has_no_exit(terminal):
    delivery = _delivery_in(terminal)
    assert not any(delivery.can_transition_to(target) for target in DeliveryStatus)
