"""Inbound cross-domain event handler — Notifications reacts to Order events.

Listens for OrderCreated (confirmation with the order total) and
OrderStatusChanged (one message per lifecycle step).
"""

import structlog
from notifications.domain import notifications
from notifications.notification.creation import notify_user
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.ordering import OrderCreated, OrderStatusChanged

logger = structlog.get_logger(__name__)

notifications.register_external_event(OrderCreated, "Ordering.OrderCreated.v1")
notifications.register_external_event(OrderStatusChanged, "Ordering.OrderStatusChanged.v1")


@notifications.event_handler(part_of=Notification, stream_category="ordering::order")
class OrderingEventsHandler:
    """Reacts to Ordering domain events to notify the order's owner."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        notify_user(
            user_id=str(event.user_id),
            notification_type=NotificationType.ORDER_CREATED.value,
            context={"order_id": str(event.order_id), "total_price": event.total_price},
            source_event_type="Ordering.OrderCreated.v1",
            created_at=event.created_at,
        )

    @handle(OrderStatusChanged)
    def on_order_status_changed(self, event: OrderStatusChanged) -> None:
        notify_user(
            user_id=str(event.user_id),
            notification_type=NotificationType.ORDER_STATUS_CHANGED.value,
            context={"order_id": str(event.order_id), "new_status": event.new_status},
            source_event_type="Ordering.OrderStatusChanged.v1",
            created_at=event.updated_at,
        )
