"""Application tests for Ordering's handlers of Payments and Fulfillment events.

Covers:
- OrderSuccessfullyPaid: Created -> Paid, replays are no-ops
- DeliveryDelivered: Shipped -> Completed once Fulfillment confirms Delivered
"""

import json
from datetime import UTC, datetime

from ordering.order.creation import CreateOrder
from ordering.order.fulfillment_events import FulfillmentOrderEventHandler
from ordering.order.lifecycle import change_order_status, mark_order_paid
from ordering.order.order import Order, OrderStatus
from ordering.order.payment_events import PaymentOrderEventHandler
from protean import current_domain
from shared.events.fulfillment import DeliveryDelivered
from shared.events.payments import OrderSuccessfullyPaid


def _create_order():
    return current_domain.process(
        CreateOrder(
            user_id="user-001",
            items=json.dumps([{"product_id": "prod-001", "product_name": "Widget", "unit_price": 25.0, "quantity": 2}]),
        ),
        asynchronous=False,
    )


def _status(order_id):
    return current_domain.repository_for(Order).get(order_id).status


def _paid_event(order_id):
    return OrderSuccessfullyPaid(
        order_id=order_id,
        checkout_session_id="cs-001",
        gateway_session_id="cs_fake_001",
        paid_at=datetime.now(UTC),
    )


def _delivered_event(order_id):
    return DeliveryDelivered(delivery_id="dlv-001", order_id=order_id, delivered_at=datetime.now(UTC))


class TestOrderSuccessfullyPaid:
    def test_created_order_becomes_paid(self):
        order_id = _create_order()
        PaymentOrderEventHandler().on_order_successfully_paid(_paid_event(order_id))
        assert _status(order_id) == OrderStatus.PAID.value

    def test_replayed_event_is_a_no_op(self):
        order_id = _create_order()
        handler = PaymentOrderEventHandler()
        handler.on_order_successfully_paid(_paid_event(order_id))
        change_order_status(order_id, OrderStatus.ACCEPTED)

        handler.on_order_successfully_paid(_paid_event(order_id))
        assert _status(order_id) == OrderStatus.ACCEPTED.value

    def test_unknown_order_is_ignored(self):
        PaymentOrderEventHandler().on_order_successfully_paid(_paid_event("missing-order"))


class TestDeliveryDelivered:
    def _shipped_order(self):
        order_id = _create_order()
        mark_order_paid(order_id)
        change_order_status(order_id, OrderStatus.ACCEPTED)
        change_order_status(order_id, OrderStatus.SHIPPED)
        return order_id

    def test_shipped_order_completes(self, delivery_service):
        order_id = self._shipped_order()
        delivery_service.set_status(order_id, "Delivered")

        FulfillmentOrderEventHandler().on_delivery_delivered(_delivered_event(order_id))
        assert _status(order_id) == OrderStatus.COMPLETED.value

    def test_status_is_confirmed_with_fulfillment(self, delivery_service):
        order_id = self._shipped_order()
        delivery_service.set_status(order_id, "InProgress")

        FulfillmentOrderEventHandler().on_delivery_delivered(_delivered_event(order_id))
        assert _status(order_id) == OrderStatus.SHIPPED.value

    def test_replayed_event_leaves_completed_order(self, delivery_service):
        order_id = self._shipped_order()
        delivery_service.set_status(order_id, "Delivered")
        handler = FulfillmentOrderEventHandler()
        handler.on_delivery_delivered(_delivered_event(order_id))

        handler.on_delivery_delivered(_delivered_event(order_id))
        assert _status(order_id) == OrderStatus.COMPLETED.value

    def test_order_not_yet_shipped_is_left_alone(self, delivery_service):
        order_id = _create_order()
        delivery_service.set_status(order_id, "Delivered")

        FulfillmentOrderEventHandler().on_delivery_delivered(_delivered_event(order_id))
        assert _status(order_id) == OrderStatus.CREATED.value
