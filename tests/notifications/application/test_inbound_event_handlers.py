"""Application tests for Notifications' handlers of Ordering and Fulfillment events."""

from datetime import UTC, datetime

from notifications.notification.fulfillment_events import FulfillmentEventsHandler
from notifications.notification.notification import Notification, NotificationType
from notifications.notification.ordering_events import OrderingEventsHandler
from protean import current_domain
from shared.events.fulfillment import DeliveryCanceled
from shared.events.ordering import OrderCreated, OrderStatusChanged


def _for_user(user_id):
    return current_domain.repository_for(Notification).find_by_user(user_id)


def _order_created(user_id, order_id="ord-001", total_price=200.0):
    return OrderCreated(order_id=order_id, user_id=user_id, total_price=total_price, created_at=datetime.now(UTC))


def _status_changed(user_id, new_status, order_id="ord-001"):
    return OrderStatusChanged(
        order_id=order_id,
        user_id=user_id,
        previous_status="Created",
        new_status=new_status,
        updated_at=datetime.now(UTC),
    )


def _delivery_canceled(user_id, order_id="ord-001"):
    return DeliveryCanceled(
        delivery_id="dlv-001",
        order_id=order_id,
        user_id=user_id,
        canceled_at=datetime.now(UTC),
    )


class TestOrderCreated:
    def test_user_is_notified_with_total(self):
        OrderingEventsHandler().on_order_created(_order_created("user-created", total_price=199.5))

        [notification] = _for_user("user-created")
        assert notification.notification_type == NotificationType.ORDER_CREATED.value
        assert notification.title == "Order created"
        assert notification.message == "Your order #ord-001 was successfully created. Total: 199.50 $."
        assert notification.source_event_type == "Ordering.OrderCreated.v1"


class TestOrderStatusChanged:
    def test_user_is_notified_of_new_status(self):
        OrderingEventsHandler().on_order_status_changed(_status_changed("user-status", "Paid"))

        [notification] = _for_user("user-status")
        assert notification.notification_type == NotificationType.ORDER_STATUS_CHANGED.value
        assert "Paid" in notification.message

    def test_one_notification_per_step(self):
        handler = OrderingEventsHandler()
        for status in ("Paid", "Accepted", "Shipped"):
            handler.on_order_status_changed(_status_changed("user-steps", status))

        assert len(_for_user("user-steps")) == 3


class TestDeliveryCanceled:
    def test_owner_is_notified(self):
        FulfillmentEventsHandler().on_delivery_canceled(_delivery_canceled("user-canceled", order_id="ord-042"))

        [notification] = _for_user("user-canceled")
        assert notification.notification_type == NotificationType.DELIVERY_STATUS_CHANGED.value
        assert notification.title == "Delivery canceled"
        assert notification.message == "Your order #ord-042 delivery was canceled."

    def test_event_without_user_is_skipped(self):
        FulfillmentEventsHandler().on_delivery_canceled(_delivery_canceled(None, order_id="ord-orphan"))

        notifications = current_domain.repository_for(Notification)._dao.query.all().items
        assert not any("ord-orphan" in n.message for n in notifications)

    def test_redelivered_event_notifies_again(self):
        handler = FulfillmentEventsHandler()
        event = _delivery_canceled("user-redelivered")
        handler.on_delivery_canceled(event)
        handler.on_delivery_canceled(event)

        assert len(_for_user("user-redelivered")) == 2
