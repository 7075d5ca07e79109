"""Inbound cross-domain event handler — Notifications reacts to Delivery events.

DeliveryCanceled carries the order owner only when Fulfillment could
resolve it. Without a user there is nobody to notify, so the event is
skipped; that is not an error.
"""

import structlog
from notifications.domain import notifications
from notifications.notification.creation import notify_user
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.fulfillment import DeliveryCanceled

logger = structlog.get_logger(__name__)

notifications.register_external_event(DeliveryCanceled, "Fulfillment.DeliveryCanceled.v1")


@notifications.event_handler(part_of=Notification, stream_category="fulfillment::delivery")
class FulfillmentEventsHandler:
    """Reacts to Fulfillment domain events to notify the order's owner."""

    @handle(DeliveryCanceled)
    def on_delivery_canceled(self, event: DeliveryCanceled) -> None:
        """Tell the order's owner their delivery was canceled.

        Open question: a redelivered DeliveryCanceled produces a second
        notification. Deduplicating on ``delivery_id`` would suppress it, but
        no delivery guarantee has been settled for the notification stream.
        """
        if not event.user_id:
            logger.info(
                "DeliveryCanceled missing user_id, skipping notification",
                order_id=str(event.order_id),
                delivery_id=str(event.delivery_id),
            )
            return

        notify_user(
            user_id=str(event.user_id),
            notification_type=NotificationType.DELIVERY_STATUS_CHANGED.value,
            context={"order_id": str(event.order_id)},
            source_event_type="Fulfillment.DeliveryCanceled.v1",
            created_at=event.canceled_at,
        )
