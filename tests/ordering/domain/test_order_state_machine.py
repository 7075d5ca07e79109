"""Tests for Order state machine — every (from, to) pair of statuses."""

import pytest
from ordering.order.events import OrderStatusChanged
from ordering.order.order import Order, OrderStatus
from protean.exceptions import ValidationError

ALLOWED = {
    (OrderStatus.DRAFT, OrderStatus.CREATED),
    (OrderStatus.CREATED, OrderStatus.PAID),
    (OrderStatus.CREATED, OrderStatus.CANCELLED),
    (OrderStatus.PAID, OrderStatus.ACCEPTED),
    (OrderStatus.PAID, OrderStatus.REJECTED),
    (OrderStatus.ACCEPTED, OrderStatus.SHIPPED),
    (OrderStatus.SHIPPED, OrderStatus.COMPLETED),
}

ALL_PAIRS = [(current, target) for current in OrderStatus for target in OrderStatus]


def _order_in(status: OrderStatus) -> Order:
    order = Order.create(
        user_id="user-001",
        items_data=[{"product_id": "prod-001", "product_name": "Widget", "unit_price": 50.0, "quantity": 1}],
    )
    order.status = status.value
    order._events.clear()
    return order


@pytest.mark.parametrize("current,target", ALL_PAIRS)
def test_can_transition_matches_lifecycle_table(current, target):
    order = _order_in(current)
    assert order.can_transition_to(target, delivery_status="Delivered") is ((current, target) in ALLOWED)


@pytest.mark.parametrize("current,target", sorted(ALLOWED, key=lambda p: (p[0].value, p[1].value)))
def test_allowed_transition_changes_status(current, target):
    order = _order_in(current)
    order.change_status(target, delivery_status="Delivered")
    assert order.status == target.value
    assert len(order._events) == 1
    event = order._events[0]
    assert isinstance(event, OrderStatusChanged)
    assert (event.previous_status, event.new_status) == (current.value, target.value)


@pytest.mark.parametrize("current,target", [pair for pair in ALL_PAIRS if pair not in ALLOWED])
def test_refused_transition_raises_and_keeps_status(current, target):
    order = _order_in(current)
    with pytest.raises(ValidationError):
        order.change_status(target, delivery_status="Delivered")
    assert order.status == current.value
    assert len(order._events) == 0


class TestCompletionGuard:
    @pytest.mark.parametrize("delivery_status", ["Pending", "InProgress", "Canceled", None])
    def test_shipped_order_cannot_complete_unless_delivered(self, delivery_status):
        order = _order_in(OrderStatus.SHIPPED)
        assert order.can_transition_to(OrderStatus.COMPLETED, delivery_status=delivery_status) is False
        with pytest.raises(ValidationError):
            order.complete(delivery_status)
        assert order.status == OrderStatus.SHIPPED.value

    def test_shipped_order_completes_when_delivered(self):
        order = _order_in(OrderStatus.SHIPPED)
        order.complete("Delivered")
        assert order.status == OrderStatus.COMPLETED.value


class TestTerminalStates:
    @pytest.mark.parametrize("terminal", [OrderStatus.REJECTED, OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    def test_terminal_status_has_no_exit(self, terminal):
        order = _order_in(terminal)
        assert not any(order.can_transition_to(target, delivery_status="Delivered") for target in OrderStatus)
